"""Small string parsing helpers."""

from __future__ import annotations

import re

__all__ = [
    "WHITESPACE",
    "str_starts_with",
    "find_word",
    "split_into_words",
    "find_substr_in_double_quotes",
    "get_int_from_str_after_eq_sign",
    "find_interval_int_bounds_in_str",
]

WHITESPACE = " \n\r\t"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(s: str) -> int:
    """Parse a leading integer, ignoring leading whitespace and trailing text."""
    match = _INT_RE.match(s)
    if match is None:
        raise ValueError(f"no integer in {s!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range in {s!r}")
    return value


def str_starts_with(s: str, prefix: str) -> bool:
    """Return True if ``s`` starts with ``prefix``."""
    return s.startswith(prefix)


def find_word(s: str, start: int = 0, delims: str = WHITESPACE) -> tuple[int, int] | None:
    """Find the next word at or after ``start``.

    Returns ``(position, length)`` of the word, or None if there is none.
    """
    p = next((i for i in range(start, len(s)) if s[i] not in delims), None)
    if p is None:
        return None
    end = next((i for i in range(p + 1, len(s)) if s[i] in delims), len(s))
    return p, end - p


def split_into_words(s: str, delims: str = WHITESPACE) -> list[str]:
    """Split ``s`` into words separated by any of the ``delims`` characters."""
    words: list[str] = []
    pos = 0
    while (found := find_word(s, pos, delims)) is not None:
        p, length = found
        words.append(s[p : p + length])
        pos = p + length + 1
    return words


def find_substr_in_double_quotes(s: str, start: int = 0) -> tuple[int, int] | None:
    """Find the next substring in double quotes at or after ``start``.

    Returns ``(position, length)`` of the text between the quotes, or None.
    """
    first = s.find('"', start)
    if first < 0:
        return None
    p = first + 1
    second = s.find('"', p)
    if second < 0:
        return None
    return p, second - p


def get_int_from_str_after_eq_sign(s: str) -> int:
    """Parse the integer after the first ``=`` (or at the start if there is none)."""
    return _parse_int(s[s.find("=") + 1 :])


def find_interval_int_bounds_in_str(s: str) -> tuple[int, int] | None:
    """Find integer bounds written as ``[lo-hi]``.

    Returns ``(lo, hi)``, or None if the brackets or the minus are missing.
    """
    open_b = s.find("[")
    if open_b < 0:
        return None
    minus = s.find("-", open_b + 1)
    if minus < 0:
        return None
    close_b = s.find("]", minus + 1)
    if close_b < 0:
        return None
    return _parse_int(s[open_b + 1 : minus]), _parse_int(s[minus + 1 : close_b])