#!/usr/bin/env python3
"""
Number Phrases — Entry Point
============================

Demonstrates the parser on the classic irregular phrases and runs the
extraction scanner over a sample text.

Usage:
    python main.py                                  # Built-in sample text
    python main.py "Four score and seven years ago"  # Extract from your text
    NUMBER_PHRASES_LOG_LEVEL=DEBUG python main.py   # Show parser decisions
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from number_phrases import NumberParseError, extract, parse

load_dotenv()


# ─── Sample Inputs ───────────────────────────────────────────────────

SCENARIOS: list[tuple[str, int | None]] = [
    ("zero", 0),
    ("ten", 10),
    ("a dozen", 12),
    ("four score and seven", 87),
    ("nineteen hundred and ninety nine", 1999),
    ("one billion, two hundred million and seven", 1_200_000_007),
    ("fifty hundred", None),  # Must be rejected
    ("tenant", None),  # Must be rejected
]

SAMPLE_TEXT = """\
Four score and seven years ago our fathers brought forth, upon this
continent, a new nation. Some two hundred and fifty thousand people heard
it repeated in nineteen hundred and sixty three; I have four cats, a dozen
eggs and one tenant."""


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printers ────────────────────────────────────────────────


def print_scenarios() -> int:
    """Parse every scenario and report whether it behaved as expected.

    Returns:
        Number of scenarios that did not behave as expected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  PARSE{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for phrase, expected in SCENARIOS:
        try:
            got: int | None = parse(phrase)
            outcome = f"{got:,}"
        except NumberParseError as exc:
            got = None
            outcome = f"{_DIM}[{exc.code}]{_RESET}"

        ok = got == expected
        if not ok:
            failures += 1
        mark = f"{_GREEN}ok{_RESET}" if ok else f"{_RED}MISMATCH{_RESET}"
        print(f"  {phrase:<46} {outcome:<24} {mark}")

    return failures


def print_matches(text: str) -> None:
    """Print every number phrase found in `text`."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  EXTRACT{_RESET}")
    print(f"{'=' * _WIDTH}")

    count = 0
    for match in extract(text):
        count += 1
        print(
            f"  {_DIM}line {match.line:>2}, col {match.column:<3}{_RESET} "
            f"{match.text!r:<40} {_BOLD}{match.value:,}{_RESET}"
        )
    print(f"{'─' * _WIDTH}")
    print(f"  {count} number phrase(s) found")
    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Run the scenarios, then extract from argv text (or the sample)."""
    logging.basicConfig(
        level=os.environ.get("NUMBER_PHRASES_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    failures = print_scenarios()
    text = " ".join(sys.argv[1:]) or SAMPLE_TEXT
    print_matches(text)
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
