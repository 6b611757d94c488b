"""End-to-end redox balancing: parse, combine, convert medium, format."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from redoxkit.combiner import combine, scale_factors
from redoxkit.formatting import format_equation
from redoxkit.medium import to_basic_medium
from redoxkit.models import Species
from redoxkit.parser import parse_half_reaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalanceResult:
    balanced: str
    steps: tuple[str, ...]
    reactants: tuple[Species, ...]
    products: tuple[Species, ...]
    electron_count: int


def balance_redox_equation(
    oxidation: str,
    reduction: str,
    acidic: bool = True,
) -> BalanceResult:
    """Balance a redox reaction from its two half-reactions.

    Args:
        oxidation: Oxidation half-reaction text, electrons on the right.
        reduction: Reduction half-reaction text, electrons on the left.
        acidic: When False the result is rewritten for basic solution.

    Returns:
        The balanced equation string, the derivation steps, the net species
        and the number of electrons transferred.

    Raises:
        ParseError: The first parse failure, unwrapped.
    """
    steps = [
        "=== Balancing Redox Reaction ===",
        f"Oxidation half-reaction: {oxidation}",
        f"Reduction half-reaction: {reduction}",
    ]

    oxidation_half = parse_half_reaction(oxidation)
    reduction_half = parse_half_reaction(reduction)

    ox_factor, red_factor = scale_factors(oxidation_half, reduction_half)
    electron_count = oxidation_half.electrons * ox_factor
    steps.append(
        f"Electrons transferred: oxidation ({oxidation_half.electrons}), "
        f"reduction ({reduction_half.electrons})"
    )
    steps.append(f"Scale oxidation ×{ox_factor}, reduction ×{red_factor}")

    equation = combine(oxidation_half, reduction_half)
    if not acidic:
        equation = to_basic_medium(equation)
        steps.append("Converted to basic medium by neutralising H⁺ with OH⁻ to form H₂O")

    balanced = format_equation(equation)
    steps.append("Final balanced equation:")
    steps.append(balanced)
    logger.debug("Balanced %r + %r -> %r", oxidation, reduction, balanced)

    return BalanceResult(
        balanced=balanced,
        steps=tuple(steps),
        reactants=equation.reactants,
        products=equation.products,
        electron_count=electron_count,
    )
