"""Small numeric warm-up exercises."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "gcd",
    "sum_and_difference",
    "describe_pair",
    "max_value",
    "min_value",
    "number_grid",
    "switch_labels",
    "sum_of_evens",
]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor found by counting down from the smaller value.

    When the smaller value is not positive it is returned unchanged.
    """
    smallest = min(a, b)
    for candidate in range(smallest, 0, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return smallest


def sum_and_difference(a: int, b: int) -> tuple[int, int]:
    """Return the sum of two numbers and the absolute value of their difference."""
    return a + b, abs(a - b)


def describe_pair(a: object, b: object) -> str:
    """Describe two values in a single sentence."""
    return f"Value of a and b is: {a} and {b}"


def _require_values(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_value(values: Iterable[int]) -> int:
    """Largest of the given values."""
    return max(_require_values(values))


def min_value(values: Iterable[int]) -> int:
    """Smallest of the given values."""
    return min(_require_values(values))


def number_grid(n: int) -> list[list[int]]:
    """An n by n grid filled row by row with 1, 2, 3, ..."""
    return [[row * n + col + 1 for col in range(n)] for row in range(max(n, 0))]


def switch_labels(num: int) -> list[str]:
    """Labels emitted by a switch where case 2 falls through to the default."""
    if num == 1:
        return ["First"]
    if num == 2:
        return ["Second", "character one"]
    return ["character one"]


def sum_of_evens(n: int) -> int:
    """Sum of all even numbers from 2 up to and including n."""
    return sum(range(2, n + 1, 2))