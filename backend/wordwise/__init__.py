"""Spaced-repetition scheduling core for vocabulary review."""

__version__ = "0.1.0"
