"""Character, memory, string, linked-list, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "output", "memory", "strings", "transform", "linked", "printf", "lines"]