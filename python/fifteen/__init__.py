"""Informed-search solver for the N-puzzle (sliding tile puzzle)."""

__version__ = "0.1.0"
