"""Data structures for species, half-reactions and net equations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HalfReactionType(str, Enum):
    OXIDATION = "oxidation"
    REDUCTION = "reduction"


@dataclass(frozen=True)
class Species:
    formula: str
    coefficient: int = 1


@dataclass(frozen=True)
class ParsedHalfReaction:
    """A half-reaction with its electron term pulled out.

    Attributes:
        reactants: Species on the left of the arrow, electrons excluded.
        products: Species on the right of the arrow, electrons excluded.
        electrons: Number of electrons transferred (> 0).
        type: OXIDATION when electrons are produced, REDUCTION when consumed.
    """

    reactants: tuple[Species, ...]
    products: tuple[Species, ...]
    electrons: int
    type: HalfReactionType


@dataclass(frozen=True)
class NetEquation:
    reactants: tuple[Species, ...]
    products: tuple[Species, ...]
