"""Backtracking tile-tour search over a fixed 10x10 board."""

__version__ = "0.1.0"
