"""Helpers for conditional values, partial application, value conversion and n-ary tuples."""

__version__ = "0.1.0"
__all__ = ["cond", "conv", "func", "tuples"]