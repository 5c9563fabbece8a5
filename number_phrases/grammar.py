"""
The place-value grammar for English number phrases.

Layers, smallest first:

    ones            one .. nine
    teens           eleven .. nineteen
    tens            twenty .. ninety  [and ones]
    less_than_100   teens | tens | ten | ones
    hundreds        ones hundred  [and less_than_100]
    big numbers     multiplier (hundred | thousand | million | billion)  [and remainder]
    irregular       (ones | a) (dozen | score)  [and ones]

Every rule is a pyparsing expression whose single token is the value of the
phrase it matched.  Alternatives are joined with `|` (MatchFirst), so the
first one that matches wins: longer forms are always listed before the
shorter forms they start with, and "one hundred" is never read as just
"one".  Which remainder may follow a magnitude word is decided by
`composition.remainder_rule`; this module only turns that decision into
expressions.
"""

from __future__ import annotations

from functools import lru_cache

import pyparsing as pp

from .composition import RemainderRule, compose, remainder_rule
from .exceptions import InvalidMagnitudeOrder
from .lexicon import CONJUNCTION, MAGNITUDES, layer, phrase_start, token

_and = pp.Suppress(token(CONJUNCTION, 0))


def conjunction(expr: pp.ParserElement) -> pp.ParserElement:
    """An optional "and" followed by `expr`; the value is `expr`'s."""
    return pp.Opt(_and) + expr


def _compose(text: str, loc: int, tokens: pp.ParseResults) -> int:
    """multiplier [base [remainder]] -> value, or no match at all."""
    multiplier, *rest = tokens
    if not rest:
        return multiplier
    base, *remainder = rest
    try:
        remainder_rule(multiplier, base)
        return compose(multiplier, base, *remainder).value
    except InvalidMagnitudeOrder as exc:
        # A failed match, not an error: the next alternative gets its turn.
        raise pp.ParseException(text, loc, str(exc)) from exc


# ─── Small Numbers ───────────────────────────────────────────────────

ones = layer("ones")
teens = layer("teens")
ten = layer("ten")
zero = layer("zero")
article = layer("article")

tens = (layer("tens") + pp.Opt(conjunction(ones))).set_parse_action(
    lambda tokens: sum(tokens)
).set_name("tens")

less_than_100 = (teens | tens | ten | ones).set_name("less_than_100")


# ─── Magnitude Words ─────────────────────────────────────────────────

HUNDRED = MAGNITUDES["hundred"]
THOUSAND = MAGNITUDES["thousand"]
MILLION = MAGNITUDES["million"]
BILLION = MAGNITUDES["billion"]
DOZEN = MAGNITUDES["dozen"]
SCORE = MAGNITUDES["score"]

_WORDS: dict[int, pp.ParserElement] = {
    value: token(word, value) for word, value in MAGNITUDES.items()
}

hundred = _WORDS[HUNDRED]


# ─── Hundreds ────────────────────────────────────────────────────────


def _hundreds(multiplier: pp.ParserElement) -> pp.ParserElement:
    return (multiplier + hundred + pp.Opt(conjunction(less_than_100))).set_parse_action(
        _compose
    )


proper_hundreds = _hundreds(ones).set_name("proper_hundreds")
article_hundreds = _hundreds(article).set_name("article_hundreds")

less_than_thousand = (proper_hundreds | less_than_100).set_name("less_than_thousand")


# ─── Composition ─────────────────────────────────────────────────────


def _remainder(base: int) -> pp.ParserElement:
    # A multiplier of one is valid before every magnitude word.
    rule = remainder_rule(1, base)
    if rule is RemainderRule.ONES:
        return ones
    if rule is RemainderRule.LESS_THAN_100:
        return less_than_100
    return below(base)


def magnitudes(*bases: int) -> pp.ParserElement:
    """Ordered choice of `<base word> [and <remainder smaller than base>]`."""
    return pp.MatchFirst(
        [_WORDS[base] + pp.Opt(conjunction(_remainder(base))) for base in bases]
    )


@lru_cache(maxsize=None)
def below(base: int) -> pp.ParserElement:
    """Any number smaller than `base`, a thousand or more."""
    smaller = [power for power in (BILLION, MILLION, THOUSAND) if power < base]
    if not smaller:
        return less_than_thousand
    return (less_than_thousand + pp.Opt(magnitudes(*smaller))).set_parse_action(_compose)


# ─── Top Level ───────────────────────────────────────────────────────

irregular = ((ones | article) + magnitudes(DOZEN, SCORE)).set_parse_action(_compose)

article_magnitudes = (article + magnitudes(BILLION, MILLION, THOUSAND)).set_parse_action(
    _compose
)

big_numbers = (
    (proper_hundreds | article_hundreds | less_than_100)
    + pp.Opt(magnitudes(HUNDRED, BILLION, MILLION, THOUSAND))
).set_parse_action(_compose)

number_parser = (
    (
        phrase_start()
        + (irregular | article_magnitudes | big_numbers | less_than_thousand | zero)
    )
    .set_name("number phrase")
    .parse_with_tabs()
)
