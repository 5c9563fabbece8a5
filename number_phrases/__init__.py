"""
Number Phrases — exact integers from English number words.

Parses phrases like "four score and seven", "nineteen hundred and ninety
nine" or "a billion" with a layered place-value grammar, and finds such
phrases in free text.

    parse("one billion, two hundred million and seven")   → 1200000007
    try_parse_prefix("ten years")                          → 10, span (0, 3)
    extract("I have four cats and a dozen eggs")           → 4, 12
"""

from .exceptions import (
    BoundaryViolation,
    IncompleteInput,
    InvalidMagnitudeOrder,
    NumberParseError,
    TokenMismatch,
)
from .extraction import extract
from .grammar import number_parser
from .lexicon import MAX_VALUE
from .models import Match, ParsedValue
from .parser import parse, try_parse_prefix

__version__ = "1.0.0"

__all__ = [
    "BoundaryViolation",
    "IncompleteInput",
    "InvalidMagnitudeOrder",
    "MAX_VALUE",
    "Match",
    "NumberParseError",
    "ParsedValue",
    "TokenMismatch",
    "extract",
    "number_parser",
    "parse",
    "try_parse_prefix",
]
