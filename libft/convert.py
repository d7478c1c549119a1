"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

from itertools import takewhile

__all__ = ["atoi", "atol", "itoa"]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_LONG_BITS = 64
INT_MIN = -(1 << (_INT_BITS - 1))
INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _split_sign(text: str) -> tuple[bool, str]:
    """Skip leading whitespace and one optional sign; return (negative, rest)."""
    text = text.lstrip(_WHITESPACE)
    negative = text.startswith("-")
    if text[:1] in ("-", "+"):
        text = text[1:]
    return negative, text


def atoi(string: str) -> int:
    """Parse a leading decimal integer the way a 32-bit ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. When the 64-bit accumulator overflows, the result is -1 for a
    positive number and 0 for a negative one. Otherwise the value is
    truncated to 32 bits.
    """
    negative, rest = _split_sign(string)
    result = 0
    for ch in takewhile(_is_ascii_digit, rest):
        following = _wrap(result * 10 + int(ch), _LONG_BITS)
        if result > following:
            return 0 if negative else -1
        result = following
    sign = -1 if negative else 1
    return _wrap(_wrap(result * sign, _LONG_BITS), _INT_BITS)


def atol(s: str) -> int:
    """Parse a leading decimal integer into a 64-bit value, wrapping on overflow."""
    negative, rest = _split_sign(s)
    result = 0
    for ch in takewhile(_is_ascii_digit, rest):
        result = _wrap(result * 10 + int(ch), _LONG_BITS)
    sign = -1 if negative else 1
    return _wrap(result * sign, _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)