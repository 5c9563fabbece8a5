"""
Number words and the lexical matcher.

This module is the single source of truth for which surface words exist and
what magnitude each one stands for.  The grammar never spells a word itself;
it asks for a layer from `LAYERS` and builds its rules from that.

The matcher is strict about word boundaries.  A number word only counts when
it is followed by whitespace, punctuation, or the end of the text, so "ten"
does not match inside "tenant" and "four" does not match the front of
"fourteen".  It must also start a word: "ten" is not found inside "often".
"""

from __future__ import annotations

import re

import pyparsing as pp

# ─── Word Lookup Tables ──────────────────────────────────────────────

ONES: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

TEENS: dict[str, int] = {
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

TEN: dict[str, int] = {"ten": 10}

ZERO: dict[str, int] = {"zero": 0}

# Irregular magnitudes: only a ones (or "a") multiplier, only a ones remainder.
IRREGULAR: dict[str, int] = {
    "dozen": 12,
    "score": 20,
}

POWERS: dict[str, int] = {
    "hundred": 100,
    "thousand": 1_000,
    "million": 1_000_000,
    "billion": 1_000_000_000,
}

# "a dozen", "a billion": the article stands in for a multiplier of one.
ARTICLE: dict[str, int] = {"a": 1}

CONJUNCTION = "and"

LAYERS: dict[str, dict[str, int]] = {
    "ones": ONES,
    "teens": TEENS,
    "tens": TENS,
    "ten": TEN,
    "zero": ZERO,
    "irregular": IRREGULAR,
    "powers": POWERS,
    "article": ARTICLE,
}

# Layers a phrase can begin with; magnitude words always need a multiplier.
STARTING_LAYERS = ("ones", "teens", "tens", "ten", "zero", "article")

MAGNITUDES: dict[str, int] = {**IRREGULAR, **POWERS}

# There is no "trillion" word, so this is the largest expressible value.
MAX_VALUE = 999_999_999_999


# ─── Boundaries & Separators ─────────────────────────────────────────

PUNCTUATION = "\"-_';:!.,?`"

# Surface words are ASCII: case folding must not turn "ſix" into "six".
_FLAGS = re.IGNORECASE | re.ASCII

_BOUNDARY = r"[\s" + re.escape(PUNCTUATION) + r"]"
_INSIDE_WORD = r"[^\s" + re.escape(PUNCTUATION) + r"]"

# Separators that may sit *between* two words of one phrase.  Sentence
# punctuation ends a word but is never swallowed into a phrase.
_SEPARATOR = re.compile(r"\s*[,\-_]+\s*|\s+", re.ASCII)

# Whitespace is skipped by pyparsing itself; this adds the comma/dash run.
_separator = pp.Opt(pp.Suppress(pp.Regex(r"[,\-_]+\s*", re.ASCII))).set_name("separator")


def _alternatives(words) -> str:
    # Longest first, so the alternation never settles for a shorter word.
    return "|".join(re.escape(word) for word in sorted(words, key=len, reverse=True))


def word_pattern(words) -> re.Pattern:
    """Any of `words`, starting a word and followed by a boundary."""
    return re.compile(
        rf"(?<!{_INSIDE_WORD})(?:{_alternatives(words)})(?={_BOUNDARY}|\Z)", _FLAGS
    )


_ANY_WORD = word_pattern([*(w for words in LAYERS.values() for w in words), CONJUNCTION])
_RUN_ON_WORD = re.compile(
    rf"(?:{_alternatives(w for words in LAYERS.values() for w in words)})(?={_INSIDE_WORD})",
    _FLAGS,
)
_MAGNITUDE_WORD = word_pattern(MAGNITUDES)


def skip_separator(text: str, index: int) -> int:
    """Index just past the separator run starting at `index` (if any)."""
    match = _SEPARATOR.match(text, index)
    return match.end() if match else index


def run_on_word(text: str, index: int) -> int | None:
    """Where a number word at `index` should have ended, if it runs on.

    "tenant" gives 3: "ten" matched, but no boundary follows it.  A complete
    number word at `index` gives None.
    """
    if _ANY_WORD.match(text, index):
        return None
    match = _RUN_ON_WORD.match(text, index)
    return match.end() if match else None


def magnitude_at(text: str, index: int) -> tuple[int, int] | None:
    """(magnitude, end) of the magnitude word at `index`, if there is one."""
    match = _MAGNITUDE_WORD.match(text, index)
    if match is None:
        return None
    return MAGNITUDES[match.group().lower()], match.end()


# ─── Lexical Matcher ─────────────────────────────────────────────────


def token(surface: str, magnitude: int) -> pp.ParserElement:
    """Match `surface` case-insensitively and return `magnitude`.

    On success the parse moves past the word and any separator run that
    follows it.  On failure nothing is consumed.
    """
    word = pp.Regex(word_pattern([surface])).set_parse_action(pp.replace_with(magnitude))
    return (word + _separator).set_name(repr(surface))


def layer(name: str) -> pp.ParserElement:
    """Ordered choice over every word of a layer, reported as one `name`."""
    words = LAYERS[name]
    return pp.MatchFirst([token(word, value) for word, value in words.items()]).set_name(name)


def phrase_start() -> pp.ParserElement:
    """Lookahead for a word that can begin a number phrase."""
    words = [word for name in STARTING_LAYERS for word in LAYERS[name]]
    return pp.FollowedBy(pp.Regex(word_pattern(words))).set_name("number word")
