"""Comparator utilities shared by the range-style guards."""

from __future__ import annotations

from fluent_guards._types import OrderedT


def less_than(value: OrderedT, other: OrderedT) -> bool:
    """Return True if value orders strictly before other."""
    return value < other


def greater_than(value: OrderedT, other: OrderedT) -> bool:
    """Return True if value orders strictly after other."""
    return value > other


def equal_to(value: OrderedT, other: OrderedT) -> bool:
    """Return True if neither value orders before the other.

    Uses the ordering operators only; __eq__ is never consulted.
    """
    return not less_than(value, other) and not greater_than(value, other)


__all__ = ["equal_to", "greater_than", "less_than"]
