"""Degree of similarity between two strings by shared adjacent pairs."""


def similarity_degree(first: str, second: str) -> int:
    """Count adjacent pairs of ``first`` that occur anywhere in ``second``."""
    known = set(zip(second, second[1:]))
    return sum(pair in known for pair in zip(first, first[1:]))