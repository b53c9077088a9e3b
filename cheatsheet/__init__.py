"""Worked examples of two-pointer, sliding-window and binary-search techniques."""

__version__ = "0.1.0"
__all__ = ["binary_search", "sliding_window", "two_pointers", "cli"]