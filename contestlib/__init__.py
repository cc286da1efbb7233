"""Data structures and algorithms for competitive programming."""

__version__ = "0.1.0"