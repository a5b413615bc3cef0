"""Classic practice algorithms as plain functions that print nothing."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "binary_search",
    "bits",
    "brackets",
    "patterns",
    "recursion",
    "sorting",
    "subarrays",
]