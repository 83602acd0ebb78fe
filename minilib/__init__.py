"""String, number, float and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["numbers", "strings", "floats", "printf", "cli"]