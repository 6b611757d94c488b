"""Half-reaction parsing.

Turns loosely formatted text such as ``"MnO₄⁻ + 8H⁺ + 5e⁻ → Mn²⁺ + 4H₂O"`` into a
`ParsedHalfReaction`. All accepted glyph variants (unicode minus signs,
superscript charges, subscript digits) are collapsed to ASCII before any
tokenizing happens, so the tokenizer only ever sees ``-``, ``+`` and ``0-9``.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from redoxkit.errors import ErrorKind, ParseError
from redoxkit.models import HalfReactionType, ParsedHalfReaction, Species

logger = logging.getLogger(__name__)

ARROW_PATTERN = re.compile(r"->|→")
COEFFICIENT_PATTERN = re.compile(r"^(\d+)\s*(.+)$")
# blank then a coefficient+formula or a bare electron: the preceding + separates
NEXT_SPECIES_PATTERN = re.compile(r"\s+(?:\d+\s*[A-Za-z(\[]|[eE]-?(?:\s|\+|$))")

_GLYPHS = str.maketrans(
    {
        "⁻": "-",
        "−": "-",
        "–": "-",
        "₋": "-",
        "⁺": "+",
        "₊": "+",
        **{sup: str(digit) for digit, sup in enumerate("⁰¹²³⁴⁵⁶⁷⁸⁹")},
        **{sub: str(digit) for digit, sub in enumerate("₀₁₂₃₄₅₆₇₈₉")},
    }
)
_ELECTRON_FORMULAS = {"e-", "e"}


def normalize_formula(formula: str) -> str:
    """Collapse whitespace and unicode sign/digit variants to plain ASCII."""
    return re.sub(r"\s+", "", formula.translate(_GLYPHS))


def is_electron(formula: str) -> bool:
    return formula.lower() in _ELECTRON_FORMULAS


def parse_half_reaction(text: str) -> ParsedHalfReaction:
    """Parse a half-reaction string.

    Args:
        text: Half-reaction with exactly one arrow (``→`` or ``->``) and an
            explicit electron term (``e-``, ``e⁻`` or ``e``) on one side.

    Returns:
        The parsed half-reaction with the electrons moved into `electrons`.

    Raises:
        ParseError: ``MALFORMED_REACTION`` for a bad arrow structure or a zero
            electron count, ``MISSING_ELECTRON_TERM`` when electrons are on
            neither side or on both.
    """
    sides = ARROW_PATTERN.split(text)
    if len(sides) != 2 or not all(side.strip() for side in sides):
        raise ParseError(
            ErrorKind.MALFORMED_REACTION,
            f"Half-reaction must contain a single arrow (→ or ->): {text!r}",
        )

    left = parse_species_list(sides[0])
    right = parse_species_list(sides[1])

    reactants, reactant_electrons = _extract_electrons(left)
    products, product_electrons = _extract_electrons(right)

    if bool(reactant_electrons) == bool(product_electrons):
        raise ParseError(
            ErrorKind.MISSING_ELECTRON_TERM,
            f"Half-reactions must include electrons (e⁻) on exactly one side: {text!r}",
        )

    if product_electrons:
        parsed = ParsedHalfReaction(
            reactants=reactants,
            products=products,
            electrons=product_electrons,
            type=HalfReactionType.OXIDATION,
        )
    else:
        parsed = ParsedHalfReaction(
            reactants=reactants,
            products=products,
            electrons=reactant_electrons,
            type=HalfReactionType.REDUCTION,
        )
    logger.debug("Parsed %r as %s with %d e-", text, parsed.type.value, parsed.electrons)
    return parsed


def parse_species_list(side: str) -> list[Species]:
    """Split one side of a reaction into species, electrons included."""
    species = []
    for token in split_side(side.translate(_GLYPHS)):
        match = COEFFICIENT_PATTERN.match(token)
        if match:
            coefficient, formula = int(match.group(1)), match.group(2)
        else:
            coefficient, formula = 1, token
        formula = normalize_formula(formula)

        if coefficient == 0:
            if is_electron(formula):
                raise ParseError(
                    ErrorKind.MALFORMED_REACTION,
                    "Electron count must be a positive integer",
                )
            logger.debug("Dropping %s with zero coefficient", formula)
            continue
        species.append(Species(formula=formula, coefficient=coefficient))
    return species


def split_side(side: str) -> list[str]:
    """Split on ``+`` separators, leaving ionic charges attached.

    A ``+`` directly after a formula character and followed by a blank,
    another ``+`` or the end of the text is a charge: ``"Fe3+ + e-"`` gives
    ``["Fe3+", "e-"]`` and ``"Fe2++e-"`` gives ``["Fe2+", "e-"]``. When the blank
    is followed by a coefficient and formula or by an electron, the ``+`` is a
    separator after all: ``"2H2O+ 2e-"`` gives ``["2H2O", "2e-"]``.
    """
    tokens = []
    current: list[str] = []
    for index, char in enumerate(side):
        if char == "+" and not _is_charge_sign(side, index):
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return [token.strip() for token in tokens if token.strip()]


def _is_charge_sign(text: str, index: int) -> bool:
    before = text[index - 1] if index > 0 else " "
    after = text[index + 1] if index + 1 < len(text) else " "
    attached = not before.isspace() and before != "+"
    if not attached:
        return False
    if after == "+":
        return True
    return after.isspace() and not NEXT_SPECIES_PATTERN.match(text, index + 1)


def _extract_electrons(species: Sequence[Species]) -> tuple[tuple[Species, ...], int]:
    remaining = tuple(s for s in species if not is_electron(s.formula))
    electrons = sum(s.coefficient for s in species if is_electron(s.formula))
    return remaining, electrons


def determine_half_reaction_type(left_side: str, right_side: str) -> HalfReactionType:
    """Classify a half-reaction from its two sides.

    Electrons on the right are released (oxidation); otherwise they are taken
    up (reduction).
    """
    right = {s.formula.lower() for s in parse_species_list(right_side)}
    if right & _ELECTRON_FORMULAS:
        return HalfReactionType.OXIDATION
    return HalfReactionType.REDUCTION
