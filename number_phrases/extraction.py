"""
Find every number phrase in free text.

The scanner is pyparsing's `scan_string` over the top-level grammar.  A
phrase can only begin at the start of a number word, so everything else
(other words, whitespace, punctuation) is stepped over without a match.  A
successful parse becomes a `Match` and scanning resumes after it.  Nothing
here ever raises for text the grammar does not like, since free text is
mostly not numbers.

    >>> [m.value for m in extract("I have four cats and a dozen eggs")]
    [4, 12]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pyparsing as pp

from .grammar import number_parser
from .models import Match
from .parser import phrase_end

logger = logging.getLogger(__name__)


def extract(text: str) -> Iterator[Match]:
    """Yield the number phrases of `text`, left to right, without overlaps.

    Matches are computed one at a time as the caller iterates; a finished
    scan cannot be resumed, call `extract` again instead.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    for tokens, start, index in number_parser.scan_string(text):
        end = phrase_end(text, start, index)
        logger.debug("Found %r -> %d at %d", text[start:end], tokens[0], start)
        yield Match(
            value=tokens[0],
            start=start,
            end=end,
            text=text[start:end],
            line=pp.lineno(start, text),
            column=pp.col(start, text),
            end_line=pp.lineno(end, text),
            end_column=pp.col(end, text),
        )
