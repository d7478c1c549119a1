"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end, or a zero length, gives an empty string.
    """
    s = _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    return _require_str(s, "s").strip(_require_str(charset, "charset"))


def split(s: str, sep: str) -> list[str]:
    """Words of ``s`` separated by runs of the character ``sep``; no empty words."""
    s = _require_str(s, "s")
    sep = _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {len(sep)} characters")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string whose i-th character is ``f(i, s[i])``."""
    s = _require_str(s, "s")
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(i, item)`` for every item of ``s`` in order, updating ``s`` in place.

    A result other than ``None`` replaces the item at that index.
    """
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result