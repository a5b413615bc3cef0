"""Binary search exercises: placement, allocation and searching sorted data."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache
from itertools import accumulate

__all__ = [
    "aggressive_cows",
    "min_pages",
    "search_range",
    "painter_partition",
    "peak_index",
    "find_pivot",
    "binary_search",
    "search_rotated",
]


def _can_place(positions: Sequence[int], cows: int, gap: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions:
        if position - last >= gap:
            placed += 1
            if placed == cows:
                return True
            last = position
    return False


def aggressive_cows(stalls: Sequence[int], k: int) -> int:
    """Largest minimum distance at which ``k`` cows can be placed in the stalls.

    Returns -1 when no distance works, which includes ``k == 1``.
    """
    if not stalls:
        raise ValueError("at least one stall is required")
    positions = sorted(stalls)
    low, high = 0, positions[-1]
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if _can_place(positions, k, mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    required = 1
    current = 0
    for count in pages:
        if count > limit:
            return False
        if current + count > limit:
            required += 1
            current = count
            if required > students:
                return False
        else:
            current += count
    return True


def min_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages any student reads when books are
    handed out in order, in contiguous runs.

    Returns -1 when there are fewer books than students.
    """
    if students < 1:
        raise ValueError("at least one student is required")
    if len(pages) < students:
        return -1
    low, high = 0, sum(pages)
    result = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(pages, students, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def _occurrence(nums: Sequence[int], key: int, *, first: bool) -> int:
    low, high = 0, len(nums) - 1
    found = -1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == key:
            found = mid
            if first:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    return (
        _occurrence(nums, target, first=True),
        _occurrence(nums, target, first=False),
    )


def painter_partition(boards: Sequence[int], k: int) -> int:
    """Least possible largest total when ``boards`` are split into at most
    ``k`` contiguous groups."""
    if k < 1:
        raise ValueError("at least one painter is required")
    if not boards:
        raise ValueError("at least one board is required")
    lengths = tuple(boards)
    prefix = (0, *accumulate(lengths))

    @cache
    def best(count: int, painters: int) -> int:
        if painters == 1:
            return prefix[count]
        if count == 1:
            return lengths[0]
        return min(
            max(best(split, painters - 1), prefix[count] - prefix[split])
            for split in range(1, count + 1)
        )

    return best(len(lengths), k)


def peak_index(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain array."""
    low, high = 0, len(arr) - 1
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def find_pivot(arr: Sequence[int]) -> int:
    """Index of the smallest element of a rotated sorted array.

    For an array that is not rotated this is the last index.
    """
    low, high = 0, len(arr) - 1
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] >= arr[0]:
            low = mid + 1
        else:
            high = mid
    return low


def binary_search(arr: Sequence[int], start: int, end: int, key: int) -> int:
    """Index of ``key`` in sorted ``arr[start..end]`` (inclusive), or -1."""
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] == key:
            return mid
        if key > arr[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array, or -1."""
    if not nums:
        return -1
    pivot = find_pivot(nums)
    last = len(nums) - 1
    if nums[pivot] <= target <= nums[last]:
        return binary_search(nums, pivot, last, target)
    return binary_search(nums, 0, pivot - 1, target)