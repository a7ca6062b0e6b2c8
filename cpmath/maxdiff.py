"""Counting ordered pairs that reach the largest difference."""

from __future__ import annotations

from collections.abc import Iterable


def count_max_difference_pairs(values: Iterable[int]) -> int:
    """Count ordered pairs ``(i, j)``, ``i != j``, with ``|a_i - a_j|`` maximal.

    When all values are equal every ordered pair qualifies; otherwise each
    pair joins a smallest value with a largest one, in either order.
    """
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    low, high = min(items), max(items)
    if low == high:
        return len(items) * (len(items) - 1)
    return 2 * items.count(low) * items.count(high)