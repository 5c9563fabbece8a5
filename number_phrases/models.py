"""
Pydantic models for parse results.

Offsets are character offsets into the text that was parsed.  `end` is the
end of the last number word, so `text[start:end]` is exactly the phrase,
without the separator that may have followed it.  Lines and columns count
from 1.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .lexicon import MAX_VALUE


class ParsedValue(BaseModel):
    """A number phrase at the start of some text, and its value."""

    value: int = Field(ge=0, le=MAX_VALUE)
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    text: str  # The phrase as written, e.g. "Four score and seven"

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)


class Match(ParsedValue):
    """A number phrase found by `extract`, in order of occurrence."""

    line: int = Field(ge=1)  # Line of the first word
    column: int = Field(ge=1)
    end_line: int = Field(ge=1)  # Just past the last word
    end_column: int = Field(ge=1)
