"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

__all__ = ["sprintf", "printf"]

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _require_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >> 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _decimal(value: Any) -> str:
    return str(_signed32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    # Text after an embedded NUL is never reached, as with a C string.
    fmt = fmt.split("\0", 1)[0]
    chars = iter(fmt)
    remaining = iter(args)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for '%{spec}'") from None
        yield convert(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` substituted.

    Unknown conversions produce nothing and consume no argument. A format
    ending in a lone ``%`` raises ValueError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be str, got {type(fmt).__name__}")
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)