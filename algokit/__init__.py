"""Classic number, array, string, sorting, binary tree and linked-list algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "linked_lists", "numbers", "sorting", "strings", "trees"]