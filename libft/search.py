"""Measuring, searching, comparing and bounded copying of strings.

A string here is a Python ``str``. Where a C string would expose its
terminating NUL, the searches treat ``"\\0"`` as the position just past the
last character. Positions are returned as indices, and ``None`` means
"not found".
"""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strdup",
    "strlcpy",
    "strlcat",
]

_NUL = "\0"


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def _require_size(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _as_char(c: str | int) -> str:
    """Turn a one-character string or an integer code into a character.

    Integer codes are truncated to a byte, as a C ``char`` conversion does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for NUL yields ``len(s)``, the terminator's position.
    """
    s = _require_str(s, "s")
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for NUL yields ``len(s)``, the terminator's position.
    """
    s = _require_str(s, "s")
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` in ``big`` lying wholly within ``length`` characters.

    An empty ``little`` is found at index 0.
    """
    big = _require_str(big, "big")
    little = _require_str(little, "little")
    _require_size(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings by code point.

    Returns the difference of the first differing code points, treating the
    end of a string as NUL, or 0 when the compared parts are equal.
    """
    s1 = _require_str(s1, "s1")
    s2 = _require_str(s2, "s2")
    _require_size(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the
    full length of ``src``; a result length smaller than that signals
    truncation.
    """
    src = _require_str(src, "src")
    _require_size(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``size`` is no larger than ``dst``, nothing is appended and the length
    reported is ``size + len(src)``.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    _require_size(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)