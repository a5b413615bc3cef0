"""Recursion exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from typing import TypeVar

__all__ = [
    "josephus",
    "natural_sum",
    "is_palindrome",
    "max_pieces",
    "permutations",
    "count_subsets",
    "subsets",
    "sum_of_digits",
    "tower_of_hanoi",
]

Peg = TypeVar("Peg")


def josephus(n: int, k: int) -> int:
    """Zero-based position of the survivor when every ``k``-th of ``n`` people leaves."""
    if n < 1:
        raise ValueError("at least one person is required")
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor


def natural_sum(n: int) -> int:
    """Sum of the natural numbers 1 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same in both directions."""
    return text == text[::-1]


def max_pieces(n: int, a: int, b: int, c: int) -> int:
    """Most pieces of lengths ``a``, ``b`` or ``c`` a rope of length ``n`` cuts into.

    Returns -1 when the rope cannot be cut exactly.
    """
    cuts = (a, b, c)
    if any(cut <= 0 for cut in cuts):
        raise ValueError("piece lengths must be positive")
    if n < 0:
        return -1
    best = [0] * (n + 1)
    for length in range(1, n + 1):
        options = [best[length - cut] if length >= cut else -1 for cut in cuts]
        top = max(options)
        best[length] = -1 if top == -1 else top + 1
    return best[n]


def permutations(text: str) -> list[str]:
    """All arrangements of ``text`` in the order produced by swapping in place."""
    chars = list(text)
    result: list[str] = []

    def walk(index: int) -> None:
        if index >= len(chars):
            result.append("".join(chars))
            return
        for j in range(index, len(chars)):
            chars[index], chars[j] = chars[j], chars[index]
            walk(index + 1)
            chars[index], chars[j] = chars[j], chars[index]

    walk(0)
    return result


def count_subsets(values: Iterable[int], target: int) -> int:
    """Number of subsets, the empty one included, whose sum is ``target``."""
    sums: Counter[int] = Counter({0: 1})
    for value in values:
        grown = Counter(sums)
        for total, ways in sums.items():
            grown[total + value] += ways
        sums = grown
    return sums[target]


def subsets(text: str) -> list[str]:
    """Every subsequence of ``text``, leaving characters out before putting them in."""

    def walk(index: int, current: str) -> Iterator[str]:
        if index == len(text):
            yield current
            return
        yield from walk(index + 1, current)
        yield from walk(index + 1, current + text[index])

    return list(walk(0, ""))


def sum_of_digits(n: int) -> int:
    """Sum of the decimal digits of ``n``; negative for a negative ``n``."""
    total = sum(int(digit) for digit in str(abs(n)))
    return -total if n < 0 else total


def tower_of_hanoi(
    n: int, source: Peg = "A", target: Peg = "C", auxiliary: Peg = "B"
) -> list[tuple[int, Peg, Peg]]:
    """Moves ``(disk, from_peg, to_peg)`` that carry ``n`` disks from source to target."""
    moves: list[tuple[int, Peg, Peg]] = []

    def move(disks: int, start: Peg, end: Peg, spare: Peg) -> None:
        if disks <= 0:
            return
        move(disks - 1, start, spare, end)
        moves.append((disks, start, end))
        move(disks - 1, spare, end, start)

    move(n, source, target, auxiliary)
    return moves