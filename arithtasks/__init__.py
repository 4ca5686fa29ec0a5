"""Solutions to a collection of arithmetic and algorithmic exercise problems."""

__version__ = "1.0.0"