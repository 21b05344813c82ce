"""String helpers with C-string semantics: comparison, conversion and splitting."""

from __future__ import annotations

import re

_INT_BITS = 32
_LONG_MAX = 2**63 - 1


def _code(c: str | int) -> int:
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError("expected a single character")
    return ord(c)


def _wrap_int(value: int) -> int:
    """Reduce an integer to a signed 32-bit value, as a C cast to int does."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def is_space(c: str | int) -> bool:
    """Return True for a tab, newline, vertical tab, form feed, carriage return or space."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def _compare(a: str, b: str, limit: int | None) -> int:
    count = 0
    for x, y in zip(a + "\0", b + "\0"):
        if limit is not None and count >= limit:
            return 0
        if x != y or x == "\0":
            return ord(x) - ord(y)
        count += 1
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the result is the difference of the first differing characters."""
    return _compare(a, b, None)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(a, b, n)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped and one sign is accepted. A value that
    overflows a 64-bit long gives -1 when positive and 0 when negative;
    otherwise the result is truncated to a 32-bit int.
    """
    match = re.match(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)", text)
    assert match is not None
    sign = -1 if match.group(1) == "-" else 1
    result = 0
    for digit in match.group(2):
        result = result * 10 + int(digit)
        if result > _LONG_MAX:
            return -1 if sign > 0 else 0
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit integer."""
    return str(_wrap_int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtok(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, dropping empty pieces.

    A NUL character ends the text.
    """
    text = text.split("\0", 1)[0]
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [word for word in re.split(pattern, text) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]