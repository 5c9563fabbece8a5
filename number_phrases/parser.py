"""
Entry points for parsing a single number phrase.

Two modes:
  - `parse` reads the whole text as one number and fails if anything is
    left over ("ten years" is an error).
  - `try_parse_prefix` reads the longest number phrase at the start of the
    text and reports where it ends ("ten years" gives 10, span 0..3), for
    callers that go on to parse a unit or another word after it.

Neither mode guesses.  When pyparsing cannot match a phrase, its
`ParseException` is translated into one of the four error kinds, with the
offset where the text stopped making sense.
"""

from __future__ import annotations

import logging
import re

import pyparsing as pp

from .composition import remainder_rule
from .exceptions import (
    BoundaryViolation,
    IncompleteInput,
    InvalidMagnitudeOrder,
    NumberParseError,
    TokenMismatch,
)
from .grammar import number_parser
from .lexicon import magnitude_at, run_on_word, skip_separator
from .models import ParsedValue

logger = logging.getLogger(__name__)

# Leading whitespace is skipped; `locn_start` is where the first word begins.
_located = pp.Located(number_parser).parse_with_tabs()

_TRAILING_SEPARATOR = re.compile(r"[\s,\-_]+$")


def _check_text(text: object) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")


def phrase_end(text: str, start: int, index: int) -> int:
    """End of the last word of a phrase that consumed text[start:index]."""
    trailing = _TRAILING_SEPARATOR.search(text, start, index)
    return trailing.start() if trailing else index


def _error(
    kind: type[NumberParseError], text: str, position: int, expected: str
) -> NumberParseError:
    found = text[position:position + 20]
    seen = repr(found) if found else "end of input"
    return kind(
        f"Expected {expected} at position {position}, found {seen}",
        position=position,
        details={"expected": [expected], "found": found},
    )


def _no_phrase(text: str, exc: pp.ParseException) -> NumberParseError:
    """Classify a text that does not even start with a number phrase."""
    end = run_on_word(text, exc.loc)
    if end is not None:
        return _error(
            BoundaryViolation, text, end, f"a word boundary after {text[exc.loc:end]!r}"
        )
    return _error(TokenMismatch, text, exc.loc, "a number word")


def _left_over(text: str, value: int, index: int) -> NumberParseError:
    """Classify the text remaining after the longest valid phrase."""
    magnitude = magnitude_at(text, index)
    if magnitude is not None:
        base, end = magnitude
        try:
            remainder_rule(value, base)
        except InvalidMagnitudeOrder as exc:
            # "fifty hundred": the phrase stopped short of a magnitude word
            # that cannot multiply it.
            return InvalidMagnitudeOrder(
                str(exc),
                position=end,
                details={
                    **exc.details,
                    "expected": ["'thousand', 'million', 'billion' or end of number"],
                    "found": text[end:end + 20],
                },
            )
    return _error(IncompleteInput, text, index, "end of input")


def _match(text: str) -> ParsedValue:
    _check_text(text)
    try:
        result = _located.parse_string(text)
    except pp.ParseException as exc:
        raise _no_phrase(text, exc) from exc
    start = result["locn_start"]
    end = phrase_end(text, start, result["locn_end"])
    return ParsedValue(value=result["value"][0], start=start, end=end, text=text[start:end])


def parse(text: str) -> int:
    """Convert a complete English number phrase to an integer.

    Args:
        text: e.g. "nineteen hundred and ninety nine"

    Returns:
        1999

    Raises:
        TokenMismatch: a word is not a number word valid at that point.
        BoundaryViolation: a number word is only the prefix of a longer word.
        InvalidMagnitudeOrder: e.g. "fifty hundred".
        IncompleteInput: a valid phrase is followed by anything else.
    """
    try:
        result = _match(text)
        rest = skip_separator(text, result.end)
        if rest < len(text):
            raise _left_over(text, result.value, rest)
    except NumberParseError as error:
        logger.debug("Rejected %r: [%s] %s", text, error.code, error)
        raise
    logger.debug("Parsed %r -> %d", text, result.value)
    return result.value


def try_parse_prefix(text: str) -> ParsedValue:
    """Parse the longest number phrase at the start of `text`.

    Returns:
        ParsedValue with the value and the span of the phrase.

    Raises:
        NumberParseError: if no number phrase starts the text.
    """
    try:
        result = _match(text)
    except NumberParseError as error:
        logger.debug("No number at start of %r: [%s] %s", text, error.code, error)
        raise
    logger.debug("Parsed prefix %r -> %d", result.text, result.value)
    return result
