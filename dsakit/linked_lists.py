"""Singly linked lists: construction, intersection, middle element and palindromes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; return its head, or None if empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet.

    Each pointer walks its own list and then the other one, so both cover the
    same distance and arrive at the meeting node (or at the end) together.
    """
    if head_a is None or head_b is None:
        return None
    a: Optional[ListNode] = head_a
    b: Optional[ListNode] = head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def get_middle(head: Optional[ListNode]) -> Any:
    """Return the value of the middle node; the second middle for even lengths."""
    if head is None:
        raise ValueError("the list is empty")
    slow = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow.val


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    if head is None:
        return True
    values = list(head)
    half = len(values) // 2
    return all(x == y for x, y in zip(values[:half], reversed(values)))