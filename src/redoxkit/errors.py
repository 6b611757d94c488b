"""Error types raised by the parser and the calculators."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_REACTION = "MalformedReaction"
    MISSING_ELECTRON_TERM = "MissingElectronTerm"
    INVALID_ELECTRON_COUNT = "InvalidElectronCount"
    INVALID_REACTION_QUOTIENT = "InvalidReactionQuotient"
    NON_POSITIVE_INPUT = "NonPositiveInput"


class RedoxError(ValueError):
    """Base class for input validation failures.

    Attributes:
        kind: Category of the failure, see `ErrorKind`.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ParseError(RedoxError):
    """Raised when a half-reaction string cannot be parsed."""


class CalculationError(RedoxError):
    """Raised when a calculator receives out-of-domain inputs."""
