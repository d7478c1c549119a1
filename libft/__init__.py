"""Character, string, memory, number-conversion, linked-list and formatted-output helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "convert", "memory", "search", "transform", "output", "printf", "linked"]