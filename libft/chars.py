"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The classifiers return a bool. The case converters return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import overload

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code for a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included (32..126)."""
    return 32 <= _code(c) <= 126


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...
def to_lower(c):
    """Lower-case an ASCII capital letter; anything else is returned as is."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...
def to_upper(c):
    """Upper-case an ASCII small letter; anything else is returned as is."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code