"""Recursive-descent calculator with variables, bitwise operators and built-in functions."""

__version__ = "0.1.0"
__all__ = ["calculator", "symbols", "tokens"]