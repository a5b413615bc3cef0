from itertools import combinations
from itertools import permutations as std_permutations
from math import factorial

import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillbook.recursion import (
    count_subsets,
    is_palindrome,
    josephus,
    max_pieces,
    natural_sum,
    permutations,
    subsets,
    sum_of_digits,
    tower_of_hanoi,
)


@given(st.integers(1, 60), st.integers(1, 20))
def test_josephus_in_range(n, k):
    assert 0 <= josephus(n, k) < n


@given(st.integers(1, 20))
def test_josephus_single_person(k):
    assert josephus(1, k) == 0


@given(st.integers(1, 80))
def test_josephus_step_one_leaves_last(n):
    assert josephus(n, 1) == n - 1


@given(st.integers(0, 8))
def test_josephus_step_two_power_of_two(exp):
    assert josephus(2**exp, 2) == 0


def test_josephus_rejects_empty_circle():
    with pytest.raises(ValueError):
        josephus(0, 3)


@given(st.integers(1, 500))
def test_natural_sum_step(n):
    assert natural_sum(n) - natural_sum(n - 1) == n


def test_natural_sum_zero_and_negative():
    assert natural_sum(0) == 0
    with pytest.raises(ValueError):
        natural_sum(-1)


@given(st.text(max_size=20))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1])


@pytest.mark.parametrize("text, expected", [("madam", True), ("ab", False), ("", True)])
def test_is_palindrome_cases(text, expected):
    assert is_palindrome(text) is expected


@given(st.integers(0, 60), st.integers(1, 9), st.integers(1, 9))
def test_max_pieces_with_unit_piece(n, b, c):
    assert max_pieces(n, 1, b, c) == n


def test_max_pieces_impossible():
    assert max_pieces(5, 2, 2, 2) == -1
    assert max_pieces(-1, 1, 2, 3) == -1


def test_max_pieces_rejects_zero_length():
    with pytest.raises(ValueError):
        max_pieces(5, 0, 1, 2)


def test_permutations_swap_order():
    assert permutations("abc") == ["abc", "acb", "bac", "bca", "cba", "cab"]


@given(st.text(alphabet="abcde", max_size=5))
def test_permutations_cover_all(text):
    result = permutations(text)
    assert len(result) == factorial(len(text))
    assert sorted(result) == sorted("".join(p) for p in std_permutations(text))


@given(st.lists(st.integers(-5, 5), max_size=8))
def test_count_subsets_total_is_power_of_two(values):
    possible = range(-40, 41)
    assert sum(count_subsets(values, t) for t in possible) == 2 ** len(values)


def test_count_subsets_empty():
    assert count_subsets([], 0) == 1
    assert count_subsets([], 5) == 0


def test_subsets_order():
    assert subsets("ab") == ["", "b", "a", "ab"]


@given(st.text(alphabet="xyz", max_size=6))
def test_subsets_cover_all(text):
    result = subsets(text)
    assert len(result) == 2 ** len(text)
    expected = sorted(
        "".join(chosen)
        for size in range(len(text) + 1)
        for chosen in combinations(text, size)
    )
    assert sorted(result) == expected


@given(st.integers(0, 10**9), st.integers(0, 9))
def test_sum_of_digits_append_digit(n, digit):
    assert sum_of_digits(10 * n + digit) == sum_of_digits(n) + digit


@given(st.integers(1, 10**9))
def test_sum_of_digits_negative(n):
    assert sum_of_digits(-n) == -sum_of_digits(n)


def test_sum_of_digits_zero():
    assert sum_of_digits(0) == 0


@given(st.integers(0, 8))
def test_tower_of_hanoi_moves_are_legal(n):
    moves = tower_of_hanoi(n, "A", "C", "B")
    assert len(moves) == 2**n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disk, start, end in moves:
        assert pegs[start][-1] == disk
        pegs[start].pop()
        assert not pegs[end] or pegs[end][-1] > disk
        pegs[end].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_tower_of_hanoi_single_disk():
    assert tower_of_hanoi(1) == [(1, "A", "C")]