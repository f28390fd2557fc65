"""Shared lookup helpers for food tables."""

import math
from collections.abc import Mapping


def find_fuzzy(table: Mapping[str, float], name: str) -> float | None:
    """Return the first table value whose key overlaps the name.

    Entries are checked in table definition order, so an earlier generic key
    (e.g. ``curry``) shadows a later, more specific one.
    """
    if not name:
        return None
    for key, value in table.items():
        if key in name or name in key:
            return value
    return None


def lookup(table: Mapping[str, float], name: str) -> float | None:
    """Exact key match, falling back to fuzzy substring matching."""
    key = name.strip().lower()
    exact = table.get(key)
    if exact is not None:
        return exact
    return find_fuzzy(table, key)


def round_half_up(value: float) -> int:
    """Round a non-negative quantity to the nearest whole number, halves up."""
    return math.floor(value + 0.5)
