"""Dining philosophers simulation: argument parsing, timing, the table and its command."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "table", "timing"]