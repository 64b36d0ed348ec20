"""Singly linked lists and palindrome checks over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head: ListNode | None = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: ListNode | None) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def is_palindrome_array(head: ListNode | None) -> bool:
    """Check for a palindrome by copying the values into a list."""
    values = list(_values(head))
    return values == values[::-1]


def is_palindrome_recursive(head: ListNode | None) -> bool:
    """Check for a palindrome by recursing to the tail and comparing on the way back."""
    front = head

    def check(node: ListNode | None) -> bool:
        nonlocal front
        if node is None:
            return True
        if not check(node.next):
            return False
        assert front is not None
        if node.val != front.val:
            return False
        front = front.next
        return True

    return check(head)


def is_palindrome_stack(head: ListNode | None) -> bool:
    """Check for a palindrome by popping a stack of the values while walking forward."""
    stack = list(_values(head))
    return all(value == stack.pop() for value in _values(head))


def is_palindrome_two_pointers(head: ListNode | None) -> bool:
    """Check for a palindrome by reversing the second half in place.

    The list is restored before returning.
    """
    if head is None or head.next is None:
        return True
    slow: ListNode | None = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    second_half = reverse_list(slow)
    try:
        return all(a == b for a, b in zip(head, _values(second_half)))
    finally:
        reverse_list(second_half)