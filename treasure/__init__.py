"""Map loading, game rules, XPM decoding and small helpers for a tile-based treasure puzzle."""

__version__ = "0.1.0"