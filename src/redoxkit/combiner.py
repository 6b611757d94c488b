"""Electron balancing of two half-reactions.

The oxidation and reduction are each scaled so that both transfer
``lcm(n_ox, n_red)`` electrons, then pooled into one signed tally per formula
(reactants negative, products positive). Whatever is left positive is a
product, negative a reactant; formulas netting to zero cancel out.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from redoxkit.models import HalfReactionType, NetEquation, ParsedHalfReaction, Species

logger = logging.getLogger(__name__)


def electron_lcm(first: int, second: int) -> int:
    return int(np.lcm(first, second))


def scale_half_reaction(half: ParsedHalfReaction, factor: int) -> ParsedHalfReaction:
    return ParsedHalfReaction(
        reactants=tuple(Species(s.formula, s.coefficient * factor) for s in half.reactants),
        products=tuple(Species(s.formula, s.coefficient * factor) for s in half.products),
        electrons=half.electrons * factor,
        type=half.type,
    )


def scale_factors(oxidation: ParsedHalfReaction, reduction: ParsedHalfReaction) -> tuple[int, int]:
    """Return the (oxidation, reduction) multipliers that equalise electrons."""
    common = electron_lcm(oxidation.electrons, reduction.electrons)
    return common // oxidation.electrons, common // reduction.electrons


def combine(oxidation: ParsedHalfReaction, reduction: ParsedHalfReaction) -> NetEquation:
    """Combine an oxidation and a reduction into a net-ionic equation.

    Args:
        oxidation: Parsed oxidation half-reaction (electrons > 0).
        reduction: Parsed reduction half-reaction (electrons > 0).

    Returns:
        The net equation. Species keep the order in which they first appear
        across oxidation reactants, oxidation products, reduction reactants
        and reduction products, so repeated calls render identically.
    """
    if oxidation.type is not HalfReactionType.OXIDATION:
        logger.warning("Oxidation argument is a %s half-reaction", oxidation.type.value)
    if reduction.type is not HalfReactionType.REDUCTION:
        logger.warning("Reduction argument is an %s half-reaction", reduction.type.value)

    ox_factor, red_factor = scale_factors(oxidation, reduction)
    logger.debug("Scaling oxidation x%d, reduction x%d", ox_factor, red_factor)
    scaled_ox = scale_half_reaction(oxidation, ox_factor)
    scaled_red = scale_half_reaction(reduction, red_factor)

    tally: dict[str, int] = {}
    for species, sign in (
        (scaled_ox.reactants, -1),
        (scaled_ox.products, 1),
        (scaled_red.reactants, -1),
        (scaled_red.products, 1),
    ):
        for s in species:
            tally[s.formula] = tally.get(s.formula, 0) + sign * s.coefficient

    reactants = [Species(formula, -net) for formula, net in tally.items() if net < 0]
    products = [Species(formula, net) for formula, net in tally.items() if net > 0]
    return NetEquation(reactants=consolidate(reactants), products=consolidate(products))


def consolidate(species: Iterable[Species]) -> tuple[Species, ...]:
    """Merge repeated formulas and drop zero coefficients, keeping first-seen order."""
    totals: dict[str, int] = {}
    for s in species:
        totals[s.formula] = totals.get(s.formula, 0) + s.coefficient
    return tuple(Species(formula, total) for formula, total in totals.items() if total != 0)


def cancel_common(
    reactants: Iterable[Species], products: Iterable[Species]
) -> tuple[tuple[Species, ...], tuple[Species, ...]]:
    """Net out formulas present on both sides of an equation."""
    left = dict((s.formula, s.coefficient) for s in consolidate(reactants))
    right = dict((s.formula, s.coefficient) for s in consolidate(products))
    for formula in left:
        if formula in right:
            common = min(left[formula], right[formula])
            left[formula] -= common
            right[formula] -= common
    return (
        consolidate(Species(f, c) for f, c in left.items()),
        consolidate(Species(f, c) for f, c in right.items()),
    )
