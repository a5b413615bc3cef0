"""Text patterns built from stars and numbers.

Every function returns the pattern as a list of lines without line endings.
Separators are kept exactly as they appear in the output, trailing ones
included. A non-positive size gives an empty pattern.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count

__all__ = [
    "butterfly",
    "zero_one_triangle",
    "rectangle",
    "hollow_rectangle",
    "inverted_half_pyramid",
    "rotated_half_pyramid",
    "repeated_number_triangle",
    "half_pyramid_numbers",
    "inverted_half_pyramid_numbers",
    "inverted_repeated_pyramid",
    "floyd_triangle",
    "rhombus",
    "number_pyramid",
    "palindromic_pyramid",
    "diamond",
    "zigzag",
]


def _spaced(numbers: Iterable[int]) -> str:
    """Numbers each followed by a single space."""
    return "".join(f"{n} " for n in numbers)


def _butterfly_line(stars: int, rows: int) -> str:
    return "*" * stars + " " * (2 * (rows - stars)) + "*" * stars


def butterfly(rows: int) -> list[str]:
    """Two star wings that meet in the middle, ``2 * rows`` lines tall."""
    upper = [_butterfly_line(i, rows) for i in range(1, rows + 1)]
    return upper + upper[::-1]


def zero_one_triangle(rows: int) -> list[str]:
    """Triangle of alternating 1s and 0s, each digit padded by a space on each side."""
    return [
        "".join(" 1 " if (i + j) % 2 == 0 else " 0 " for j in range(1, i + 1))
        for i in range(1, rows + 1)
    ]


def rectangle(rows: int, cols: int) -> list[str]:
    """Solid rectangle of stars."""
    return ["*" * cols for _ in range(rows)]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Rectangle of stars with a blank interior."""
    lines = []
    for i in range(1, rows + 1):
        if i in (1, rows):
            lines.append("*" * cols)
        else:
            lines.append(
                "".join("*" if j in (1, cols) else " " for j in range(1, cols + 1))
            )
    return lines


def inverted_half_pyramid(rows: int) -> list[str]:
    """Left-aligned star triangle, widest line first."""
    return ["*" * i for i in range(rows, 0, -1)]


def rotated_half_pyramid(rows: int) -> list[str]:
    """Right-aligned star triangle, narrowest line first."""
    return [" " * (rows - i) + "*" * i for i in range(1, rows + 1)]


def repeated_number_triangle(rows: int) -> list[str]:
    """Line ``i`` holds the number ``i`` repeated ``i`` times."""
    return [_spaced([i] * i) for i in range(1, rows + 1)]


def half_pyramid_numbers(rows: int) -> list[str]:
    """Line ``i`` counts from 1 to ``i``."""
    return [_spaced(range(1, i + 1)) for i in range(1, rows + 1)]


def inverted_half_pyramid_numbers(rows: int) -> list[str]:
    """Counting lines from 1 to ``rows`` down to a single 1."""
    return [_spaced(range(1, i + 1)) for i in range(rows, 0, -1)]


def inverted_repeated_pyramid(rows: int) -> list[str]:
    """Line ``i`` holds ``i`` repeated ``rows - i + 1`` times."""
    return [_spaced([i] * (rows - i + 1)) for i in range(1, rows + 1)]


def floyd_triangle(rows: int) -> list[str]:
    """Consecutive numbers from 1 laid out in lines of growing length."""
    numbers = count(1)
    return [_spaced(next(numbers) for _ in range(i)) for i in range(1, rows + 1)]


def rhombus(rows: int) -> list[str]:
    """A slanted block of ``rows`` stars per line, each star padded by spaces."""
    return [" " * (rows - i) + " * " * rows for i in range(1, rows + 1)]


def number_pyramid(rows: int) -> list[str]:
    """Centred lines counting from 1 to the line number."""
    return [" " * (rows - i) + _spaced(range(1, i + 1)) for i in range(1, rows + 1)]


def palindromic_pyramid(rows: int) -> list[str]:
    """Centred lines of digits counting down to 1 and back up."""
    lines = []
    for i in range(1, rows + 1):
        down = "".join(str(j) for j in range(i, 0, -1))
        up = "".join(str(j) for j in range(2, i + 1))
        lines.append(" " * (rows - i) + down + up)
    return lines


def diamond(rows: int) -> list[str]:
    """A star pyramid followed by its mirror image; the widest line appears twice."""
    upper = [" " * (rows - i) + "*" * (2 * i - 1) for i in range(1, rows + 1)]
    return upper + upper[::-1]


def zigzag(cols: int) -> list[str]:
    """Three-line zigzag of stars ``cols`` characters wide."""
    return [
        "".join(
            "*" if (i + j) % 4 == 0 or (j % 4 == 0 and i % 2 == 0) else " "
            for j in range(1, cols + 1)
        )
        for i in range(1, 4)
    ]