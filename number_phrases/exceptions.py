"""
Exception hierarchy for number-phrase parsing.

Each exception type maps to one way a phrase can fail the grammar, so
callers can tell a misspelt word from an ill-formed magnitude without
inspecting messages.  All of them are local, recoverable conditions.
"""

from __future__ import annotations


class NumberParseError(ValueError):
    """Base exception for all grammar failures."""

    code = "NUMBER_PARSE_ERROR"

    def __init__(
        self,
        message: str,
        position: int = 0,
        details: dict | None = None,
        code: str | None = None,
    ):
        self.code = code or type(self).code
        self.position = position
        self.details = details or {}
        super().__init__(message)


class TokenMismatch(NumberParseError):
    """The next word is not a number word valid at this point."""

    code = "TOKEN_MISMATCH"


class BoundaryViolation(NumberParseError):
    """A number word matched as the prefix of a longer word ("ten" in "tenant")."""

    code = "BOUNDARY_VIOLATION"


class IncompleteInput(NumberParseError):
    """Full parse requested, but text remains after the longest phrase."""

    code = "INCOMPLETE_INPUT"


class InvalidMagnitudeOrder(NumberParseError):
    """A multiplier or remainder is out of range for its magnitude ("fifty hundred")."""

    code = "INVALID_MAGNITUDE_ORDER"