"""Graph edge-list parsers, integer numeric helpers, bit arrays and sorted-sequence searches."""

__version__ = "0.1.0"