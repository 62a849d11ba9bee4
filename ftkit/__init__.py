"""Helpers for characters, numbers, strings, searching, comparison, buffers, memory, linked lists, line reading and output."""

__version__ = "0.1.0"

__all__ = [
    "buffers",
    "chars",
    "compare",
    "lines",
    "linked",
    "memory",
    "numbers",
    "output",
    "search",
    "strings",
]