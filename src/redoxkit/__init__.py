"""redoxkit core package."""

from redoxkit.balancer import BalanceResult, balance_redox_equation
from redoxkit.combiner import combine
from redoxkit.electrochemistry import (
    CellPotentialResult,
    ElectrolysisResult,
    NernstResult,
    calculate_cell_potential,
    calculate_electrolysis,
    calculate_nernst_equation,
)
from redoxkit.errors import CalculationError, ErrorKind, ParseError, RedoxError
from redoxkit.formatting import format_equation
from redoxkit.medium import to_basic_medium
from redoxkit.models import HalfReactionType, NetEquation, ParsedHalfReaction, Species
from redoxkit.parser import parse_half_reaction
from redoxkit.potentials import (
    STANDARD_REDUCTION_POTENTIALS,
    get_all_half_reactions,
    get_standard_potential,
)

__all__ = [
    "BalanceResult",
    "balance_redox_equation",
    "combine",
    "CellPotentialResult",
    "ElectrolysisResult",
    "NernstResult",
    "calculate_cell_potential",
    "calculate_electrolysis",
    "calculate_nernst_equation",
    "CalculationError",
    "ErrorKind",
    "ParseError",
    "RedoxError",
    "format_equation",
    "to_basic_medium",
    "HalfReactionType",
    "NetEquation",
    "ParsedHalfReaction",
    "Species",
    "parse_half_reaction",
    "STANDARD_REDUCTION_POTENTIALS",
    "get_all_half_reactions",
    "get_standard_potential",
]
