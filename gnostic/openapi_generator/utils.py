"""Small string helpers used by the OpenAPI generator."""

from __future__ import annotations


def contains(s, e) -> bool:
    """Return True if the sequence holds the string."""
    return e in s


def append_unique(s, e) -> list:
    """Return the list with the string added if it is not already there."""
    if e in s:
        return list(s)
    return [*s, e]


def singular(plural: str) -> str:
    """Return the singular form of a collection name."""
    if plural.endswith("ves"):
        return plural[: -len("ves")] + "f"
    if plural.endswith("ies"):
        return plural[: -len("ies")] + "y"
    if plural.endswith("s"):
        return plural[:-1]
    return plural