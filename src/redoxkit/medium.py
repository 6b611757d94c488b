"""Acidic to basic medium conversion."""

from __future__ import annotations

from redoxkit.combiner import cancel_common, consolidate
from redoxkit.models import NetEquation, Species

PROTON = "H+"
WATER = "H2O"
HYDROXIDE = "OH-"


def to_basic_medium(equation: NetEquation) -> NetEquation:
    """Rewrite an acidic net equation for basic solution.

    Every H+ is neutralised with OH- (H+ + OH- → H2O): the H+ on a side becomes
    H2O on that side and the same amount of OH- goes to the other side. Water
    and hydroxide are then netted across both sides. Equations without H+ come
    back unchanged.
    """
    reactants, products = equation.reactants, equation.products
    reactants, products = _neutralize(reactants, products)
    products, reactants = _neutralize(products, reactants)
    reactants, products = cancel_common(reactants, products)
    return NetEquation(reactants=consolidate(reactants), products=consolidate(products))


def _neutralize(
    side: tuple[Species, ...], opposite: tuple[Species, ...]
) -> tuple[tuple[Species, ...], tuple[Species, ...]]:
    protons = sum(s.coefficient for s in side if s.formula == PROTON)
    if protons == 0:
        return side, opposite
    side = tuple(s for s in side if s.formula != PROTON) + (Species(WATER, protons),)
    opposite = opposite + (Species(HYDROXIDE, protons),)
    return cancel_common(side, opposite)
