"""
Composition of a multiplier, a magnitude and a remainder.

English numbers are not positional.  "nineteen hundred" is fine, "fifty
hundred" is not; "four score and seven" allows only a ones remainder; after
"million" anything smaller than a million may follow.  This module decides,
for a parsed (multiplier, base) pair, which remainder grammar applies and
computes the final value.  It does no parsing itself, so every rule can be
tested with plain integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidMagnitudeOrder
from .lexicon import MAX_VALUE

# Teens and below may multiply "hundred" directly ("nineteen hundred").
IMPROPER_HUNDRED_LIMIT = 20


class RemainderRule(str, Enum):
    """Which grammar may follow a magnitude word."""

    NONE = "NONE"  # No magnitude word: the multiplier is the value
    ONES = "ONES"  # dozen / score
    LESS_THAN_100 = "LESS_THAN_100"  # hundred
    SMALLER_MAGNITUDES = "SMALLER_MAGNITUDES"  # thousand / million / billion


@dataclass(frozen=True)
class Composition:
    """value = multiplier * base + remainder, with remainder < base."""

    multiplier: int
    base: int
    remainder: int = 0

    def __post_init__(self) -> None:
        if self.multiplier < 1:
            raise InvalidMagnitudeOrder(
                f"Multiplier must be positive, got {self.multiplier}",
                details={"multiplier": self.multiplier, "base": self.base},
            )
        if self.remainder < 0 or (self.base > 1 and self.remainder >= self.base):
            raise InvalidMagnitudeOrder(
                f"Remainder {self.remainder} is not smaller than base {self.base}",
                details={"base": self.base, "remainder": self.remainder},
            )
        if self.value > MAX_VALUE:
            raise InvalidMagnitudeOrder(
                f"{self.value} exceeds the largest supported value {MAX_VALUE}",
                details={"value": self.value, "max_value": MAX_VALUE},
            )

    @property
    def value(self) -> int:
        return self.multiplier * self.base + self.remainder


def remainder_rule(multiplier: int, base: int) -> RemainderRule:
    """Decide what may follow `multiplier base`.

    Raises:
        InvalidMagnitudeOrder: for a non-positive multiplier, or a multiplier
            of twenty or more directly before "hundred".
    """
    if multiplier < 1:
        raise InvalidMagnitudeOrder(
            f"Multiplier must be positive, got {multiplier}",
            details={"multiplier": multiplier, "base": base},
        )
    if base > 100:
        return RemainderRule.SMALLER_MAGNITUDES
    if base == 1:
        return RemainderRule.NONE
    if base < 100:
        return RemainderRule.ONES
    if multiplier < IMPROPER_HUNDRED_LIMIT:
        return RemainderRule.LESS_THAN_100
    raise InvalidMagnitudeOrder(
        f"{multiplier} cannot multiply 'hundred'; "
        f"expected 'thousand', 'million', 'billion' or end of number",
        details={"multiplier": multiplier, "base": base},
    )


def compose(multiplier: int, base: int, remainder: int | None = None) -> Composition:
    """Build a checked composition; an absent remainder counts as zero."""
    return Composition(multiplier, base, remainder or 0)
