"""A printf-style formatter for a fixed set of conversions and flags."""

__version__ = "0.1.0"
__all__ = ["conversions", "flags", "padding", "printer", "spec", "textutils"]