"""A small printf supporting %c, %s, %d, %i, %u, %x, %X, %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator

_UINT_MASK = (1 << 32) - 1
_ULLONG_MASK = (1 << 64) - 1


def _as_int(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: Any) -> str:
    return str(_as_int(int(value)))


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULLONG_MASK
    return "(nil)" if address == 0 else "0x" + format(address, "x")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument.
    """
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
        elif spec in _CONVERTERS:
            out.append(_CONVERTERS[spec](_take(values, spec)))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)