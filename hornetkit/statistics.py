"""Summary statistics over sequences of numbers: mean, deviation and Gini coefficient."""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real


def _as_list(values: Iterable[Real]) -> list[Real]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def average(values: Iterable[Real]) -> float:
    """Return the arithmetic mean of ``values``."""
    items = _as_list(values)
    return sum(items) / len(items)


def std_deviation(values: Iterable[Real]) -> float:
    """Return the population standard deviation of ``values``.

    Computed as ``sqrt(n * sum(x**2) - sum(x)**2) / n``.
    """
    items = _as_list(values)
    count = len(items)
    total = sum(items)
    total_sq = sum(item * item for item in items)
    spread = count * total_sq - total * total
    # Rounding with floating-point input can leave a tiny negative residue.
    return math.sqrt(max(spread, 0)) / count


def gini_coefficient(values: Iterable[Real]) -> float:
    """Return the Gini coefficient of ``values``, clamped to be non-negative.

    Zero means all values are equal; values close to one mean a single item
    dominates. A sequence summing to zero yields NaN.
    """
    items = sorted(_as_list(values))
    size = len(items)
    numerator = sum(rank * value for rank, value in enumerate(items, start=1))
    denominator = sum(items)
    if denominator == 0:
        return math.nan
    result = (2 * numerator) / (size * denominator) - (size + 1) / size
    return max(result, 0.0)