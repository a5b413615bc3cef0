"""Bit manipulation exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

__all__ = [
    "get_bit",
    "set_bit",
    "clear_bit",
    "update_bit",
    "count_ones",
    "is_power_of_two",
    "find_unique",
    "find_two_unique",
    "find_unique_in_triplets",
    "bit_subsets",
]

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def get_bit(num: int, pos: int) -> bool:
    """Whether bit ``pos`` of ``num`` is set."""
    return (num & (1 << pos)) != 0


def set_bit(num: int, pos: int) -> int:
    """``num`` with bit ``pos`` set."""
    return num | (1 << pos)


def clear_bit(num: int, pos: int) -> int:
    """``num`` with bit ``pos`` cleared."""
    return num & ~(1 << pos)


def update_bit(num: int, pos: int, value: int) -> int:
    """``num`` with bit ``pos`` replaced by ``value``."""
    return clear_bit(num, pos) | (value << pos)


def count_ones(num: int) -> int:
    """Number of set bits; negative numbers are read as 32-bit two's complement."""
    if num < 0:
        num &= _WORD_MASK
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def is_power_of_two(num: int) -> bool:
    """Whether ``num`` is a positive power of two."""
    return num != 0 and not (num & (num - 1))


def find_unique(values: Iterable[int]) -> int:
    """The one value that appears an odd number of times when all others pair up."""
    return reduce(xor, values, 0)


def find_two_unique(values: Sequence[int]) -> tuple[int, int]:
    """The two values that appear once when every other value appears twice.

    The first value returned is the one that has the lowest differing bit set.
    """
    total = find_unique(values)
    if total == 0:
        raise ValueError("no two distinct unique values present")
    lowest = total & -total
    first = reduce(xor, (v for v in values if v & lowest), 0)
    return first, first ^ total


def find_unique_in_triplets(values: Sequence[int]) -> int:
    """The value appearing once when every other value appears three times.

    Values are treated as 32-bit signed integers.
    """
    result = 0
    for pos in range(_WORD_BITS):
        ones = sum(get_bit(v & _WORD_MASK, pos) for v in values)
        if ones % 3:
            result = set_bit(result, pos)
    if get_bit(result, _WORD_BITS - 1):
        result -= 1 << _WORD_BITS
    return result


def bit_subsets(values: Sequence[int]) -> list[list[int]]:
    """All subsets of ``values`` in the order given by counting bit masks."""
    return [
        [value for pos, value in enumerate(values) if get_bit(mask, pos)]
        for mask in range(1 << len(values))
    ]