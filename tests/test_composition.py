"""
Tests for the building blocks under the grammar: the composition resolver,
the lexical matcher and the pyparsing rules built from them.
"""

from __future__ import annotations

import pyparsing as pp
import pytest

from number_phrases import MAX_VALUE, grammar, parse
from number_phrases.composition import (
    IMPROPER_HUNDRED_LIMIT,
    Composition,
    RemainderRule,
    compose,
    remainder_rule,
)
from number_phrases.exceptions import InvalidMagnitudeOrder
from number_phrases.lexicon import magnitude_at, run_on_word, token

PHRASES = [
    "four score and seven",
    "two dozen and three",
    "nineteen hundred and ninety nine",
    "one thousand and one",
    "a hundred and five thousand, six hundred and seven",
    "one hundred and twenty three million, four hundred and fifty six thousand, seven hundred and eighty nine",
    "nine hundred and eighty seven billion, six hundred and fifty four million, three hundred and twenty one thousand and twelve",
]


# ═══════════════════════════════════════════════════════════════════════
# COMPOSITION RESOLVER
# ═══════════════════════════════════════════════════════════════════════


class TestRemainderRule:
    def test_large_magnitudes(self):
        for base in (1_000, 1_000_000, 1_000_000_000):
            assert remainder_rule(999, base) is RemainderRule.SMALLER_MAGNITUDES

    def test_no_magnitude(self):
        assert remainder_rule(42, 1) is RemainderRule.NONE

    def test_dozen_and_score(self):
        assert remainder_rule(4, 20) is RemainderRule.ONES
        assert remainder_rule(1, 12) is RemainderRule.ONES

    def test_improper_hundred_threshold(self):
        assert IMPROPER_HUNDRED_LIMIT == 20
        assert remainder_rule(12, 100) is RemainderRule.LESS_THAN_100
        assert remainder_rule(19, 100) is RemainderRule.LESS_THAN_100
        with pytest.raises(InvalidMagnitudeOrder):
            remainder_rule(20, 100)
        with pytest.raises(InvalidMagnitudeOrder):
            remainder_rule(50, 100)

    def test_zero_multiplier_rejected(self):
        with pytest.raises(InvalidMagnitudeOrder):
            remainder_rule(0, 1000)


class TestComposition:
    def test_value(self):
        assert Composition(4, 20, 7).value == 87
        assert compose(19, 100, 99).value == 1999
        assert compose(3, 1000).value == 3000

    def test_remainder_must_be_smaller_than_base(self):
        with pytest.raises(InvalidMagnitudeOrder):
            Composition(1, 100, 100)
        with pytest.raises(InvalidMagnitudeOrder):
            compose(1, 1000, 1000)

    def test_multiplier_must_be_positive(self):
        with pytest.raises(InvalidMagnitudeOrder):
            Composition(0, 100, 5)

    def test_range(self):
        assert compose(999, 1_000_000_000, 999_999_999).value == MAX_VALUE
        with pytest.raises(InvalidMagnitudeOrder):
            compose(1000, 1_000_000_000)

    def test_accepted_parses_keep_remainder_below_base(self, monkeypatch):
        seen: list[Composition] = []

        def spy(multiplier, base, remainder=None):
            result = compose(multiplier, base, remainder)
            seen.append(result)
            return result

        monkeypatch.setattr(grammar, "compose", spy)
        for phrase in PHRASES:
            parse(phrase)

        assert seen
        for composition in seen:
            assert composition.remainder < composition.base or composition.base == 1
            assert composition.multiplier >= 1


# ═══════════════════════════════════════════════════════════════════════
# LEXICAL MATCHER
# ═══════════════════════════════════════════════════════════════════════


def _end(element: pp.ParserElement, text: str) -> int:
    """Where `element`, matched at the start of `text`, stops consuming."""
    _, start, end = next(element.scan_string(text))
    assert start == 0
    return end


class TestToken:
    def test_matches_case_insensitively(self):
        assert token("ten", 10).parse_string("TEN")[0] == 10
        assert _end(token("ten", 10), "TEN") == 3

    def test_prefix_of_longer_word_is_rejected(self):
        with pytest.raises(pp.ParseException):
            token("ten", 10).parse_string("tenant")

    def test_four_does_not_match_fourteen(self):
        with pytest.raises(pp.ParseException):
            token("four", 4).parse_string("fourteen")

    def test_word_must_start_a_word(self):
        matches = list(token("ten", 10).scan_string("often ten"))
        assert [start for _, start, _ in matches] == [6]

    def test_mismatch(self):
        with pytest.raises(pp.ParseException) as exc_info:
            token("ten", 10).parse_string("two")
        assert exc_info.value.loc == 0

    def test_consumes_following_separator(self):
        assert _end(token("twenty", 20), "twenty-one") == 7
        assert _end(token("billion", 10**9), "billion,  two") == 10
        assert _end(token("one", 1), "one   two") == 6

    def test_sentence_punctuation_is_a_boundary_but_not_consumed(self):
        assert _end(token("ten", 10), "ten. Then") == 3

    def test_ascii_case_folding_only(self):
        with pytest.raises(pp.ParseException):
            token("six", 6).parse_string("ſix")


class TestWordLookups:
    def test_run_on_word(self):
        assert run_on_word("tenant", 0) == 3
        assert run_on_word("fourteenth", 0) == 8
        assert run_on_word("a dozens", 2) == 7

    def test_complete_or_unknown_word_does_not_run_on(self):
        assert run_on_word("fourteen", 0) is None
        assert run_on_word("banana", 0) is None
        assert run_on_word("", 0) is None

    def test_magnitude_at(self):
        assert magnitude_at("fifty hundred", 6) == (100, 13)
        assert magnitude_at("a Score", 2) == (20, 7)
        assert magnitude_at("fifty hundreds", 6) is None
        assert magnitude_at("fifty", 0) is None


# ═══════════════════════════════════════════════════════════════════════
# GRAMMAR RULES
# ═══════════════════════════════════════════════════════════════════════


class TestRules:
    def test_alternatives_are_ordered(self):
        rule = token("one", 1) | token("one", 100)
        assert rule.parse_string("one")[0] == 1

    def test_conjunction_is_optional(self):
        rule = grammar.conjunction(grammar.ones)
        assert rule.parse_string("and seven")[0] == 7
        assert rule.parse_string("seven")[0] == 7
        with pytest.raises(pp.ParseException):
            rule.parse_string("and")

    def test_tens(self):
        assert grammar.tens.parse_string("ninety-nine")[0] == 99
        assert grammar.tens.parse_string("forty and two")[0] == 42
        assert grammar.tens.parse_string("forty")[0] == 40

    def test_less_than_thousand(self):
        assert grammar.less_than_thousand.parse_string("nine hundred and ninety nine")[0] == 999
        assert grammar.less_than_thousand.parse_string("nineteen")[0] == 19

    def test_remainder_below_a_million(self):
        rule = grammar.below(grammar.MILLION)
        assert rule.parse_string("two hundred thousand and six")[0] == 200_006
        assert rule.parse_string("seven")[0] == 7

    def test_remainder_below_a_thousand_has_no_magnitudes(self):
        assert grammar.below(grammar.THOUSAND) is grammar.less_than_thousand

    def test_invalid_composition_is_not_a_match(self):
        with pytest.raises(pp.ParseException):
            grammar.big_numbers.parse_string("fifty hundred")

    def test_top_level_falls_back_to_shorter_phrase(self):
        assert grammar.number_parser.parse_string("fifty hundred")[0] == 50

    def test_irregular(self):
        assert grammar.irregular.parse_string("a score and one")[0] == 21
        with pytest.raises(pp.ParseException):
            grammar.irregular.parse_string("ten dozen")
