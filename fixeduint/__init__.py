"""Fixed-width unsigned big integers with checked, saturating and overflowing arithmetic."""

__version__ = "0.1.0"

__all__ = ["codec", "errors", "modular", "uint", "wordmath"]