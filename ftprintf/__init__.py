"""A small printf with a fixed set of conversions, plus character, byte-buffer, string and stream-output helpers."""

__version__ = "0.1.0"

__all__ = ["chartype", "memory", "strings", "transform", "output", "formatter"]