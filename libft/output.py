"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from libft.convert import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def putchar_fd(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character to ``stream``.

    An integer is taken as a character code truncated to a byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        char = c
    elif isinstance(c, int):
        char = chr(c & 0xFF)
    else:
        raise TypeError(f"expected str or int, got {type(c).__name__}")
    _target(stream).write(char)


def putstr_fd(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream``."""
    _target(stream).write(_require_str(s, "s"))


def putendl_fd(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    out = _target(stream)
    out.write(_require_str(s, "s"))
    out.write("\n")


def putnbr_fd(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer to ``stream``."""
    _target(stream).write(itoa(n))