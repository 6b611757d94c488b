"""Rendering of net equations as text."""

from __future__ import annotations

from typing import Iterable

from redoxkit.models import NetEquation, Species

ARROW = "→"


def format_species(species: Species) -> str:
    coefficient = "" if species.coefficient == 1 else str(species.coefficient)
    return f"{coefficient}{species.formula}"


def format_side(species: Iterable[Species]) -> str:
    return " + ".join(format_species(s) for s in species)


def format_equation(equation: NetEquation) -> str:
    """Render ``"a + 2b → c"`` in the stored species order."""
    return f"{format_side(equation.reactants)} {ARROW} {format_side(equation.products)}"
