"""Singly linked lists and a few classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end and return the new head.

    A list shorter than ``n`` is returned unchanged.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    dummy = ListNode(0, head)
    slow = fast = dummy
    for _ in range(n):
        if fast.next is None:
            return head
        fast = fast.next
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge any number of lists into one new list sorted ascending."""
    values = sorted(chain.from_iterable(to_values(head) for head in lists))
    return from_values(values)


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    dummy = ListNode(0, head)
    cur = dummy
    while cur.next is not None and cur.next.next is not None:
        first = cur.next
        second = first.next
        first.next = second.next
        second.next = first
        cur.next = second
        cur = first
    return dummy.next