"""Bracket balance checking with nesting precedence."""

from __future__ import annotations

__all__ = ["bracket_precedence", "are_brackets_balanced"]

_PRECEDENCE = {"[": 1, "]": 1, "{": 2, "}": 2, "(": 3, ")": 3}
_OPENING = frozenset("[{(")
_CLOSING = frozenset("]})")


def bracket_precedence(char: str) -> int:
    """Nesting rank of a bracket: square 1, curly 2, round 3, anything else 0."""
    return _PRECEDENCE.get(char, 0)


def are_brackets_balanced(expression: str) -> bool:
    """Whether the brackets match and nest as square around curly around round.

    An opening bracket may only follow one of the same or lower rank.
    Characters that are not brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        rank = bracket_precedence(char)
        if char in _OPENING:
            if stack and rank < bracket_precedence(stack[-1]):
                return False
            stack.append(char)
        elif char in _CLOSING:
            if not stack or bracket_precedence(stack[-1]) != rank:
                return False
            stack.pop()
    return not stack