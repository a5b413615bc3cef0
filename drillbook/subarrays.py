"""Subarray sums and searches."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

__all__ = [
    "kadane_sum",
    "max_circular_sum",
    "max_subarray_sum",
    "find_pair_with_sum",
    "all_subarrays",
]


def _require(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("at least one value is required")


def kadane_sum(values: Sequence[int]) -> int:
    """Largest subarray sum by Kadane's method; an all-negative input gives 0."""
    _require(values)
    best = current = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def max_circular_sum(values: Sequence[int]) -> int:
    """Largest subarray sum when the sequence wraps around."""
    normal = kadane_sum(values)
    circular = sum(values) + kadane_sum([-v for v in values])
    return max(circular, normal)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum over every contiguous, non-empty subarray, found exhaustively."""
    _require(values)
    return max(sum(sub) for sub in all_subarrays(values))


def find_pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of the first pair of values adding up to ``target``, or None."""
    for (i, a), (j, b) in combinations(enumerate(values), 2):
        if a + b == target:
            return i, j
    return None


def all_subarrays(values: Sequence[int]) -> list[list[int]]:
    """Every contiguous subarray, grouped by start index, shortest first."""
    n = len(values)
    return [list(values[start:stop]) for start in range(n) for stop in range(start + 1, n + 1)]