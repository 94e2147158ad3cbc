"""Classic data structures and algorithms, with a small interactive shopping cart."""

__version__ = "0.1.0"