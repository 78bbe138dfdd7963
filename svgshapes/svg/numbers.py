"""Numeric tokenizer for free-form SVG attribute text.

Numbers are matched left to right; anything between matches (units, commas,
whitespace) is ignored. The decimal separator is always ``.``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

_NUMBER = r"[+-]?(?:\d+\.\d+|\d+\.|\.\d+|\d+)(?:[eE][+-]?\d+)?"

NUMBER_RE = re.compile(_NUMBER)
# Number at the start of a value, e.g. "2px" or " 10 ".
LEADING_NUMBER_RE = re.compile(r"[\t\n\r ]*(" + _NUMBER + ")")


def iter_numbers(text: str | None) -> Iterator[float]:
    """Lazily yield every number found in ``text``."""
    if not text:
        return
    for m in NUMBER_RE.finditer(text):
        yield float(m.group(0))


def parse_numbers(text: str | None) -> list[float]:
    return list(iter_numbers(text))


def leading_number(text: str | None, default: float | None = None) -> float | None:
    """First number in ``text``, or ``default`` when there is none."""
    return next(iter_numbers(text), default)


def parse_length(text: str | None) -> float | None:
    """Number at the very start of ``text`` (``"2px"`` -> 2.0); None if malformed."""
    if text is None:
        return None
    m = LEADING_NUMBER_RE.match(text)
    if m is None:
        return None
    return float(m.group(1))


def parse_token(token: str) -> float | None:
    """Parse one whole token; None unless the entire token is a number."""
    m = NUMBER_RE.fullmatch(token.strip())
    if m is None:
        return None
    return float(m.group(0))
