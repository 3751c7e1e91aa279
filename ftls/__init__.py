"""Directory listing in the style of a minimal ls, with supporting text and buffer utilities."""

__version__ = "0.1.0"