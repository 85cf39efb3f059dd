"""Singly linked list nodes and digit-list addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; iterating yields the values from here on."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _values(head: ListNode | None) -> Iterator[int]:
    return iter(head) if head is not None else iter(())


def generate_list(data: Iterable[int]) -> ListNode:
    """Build a linked list holding ``data`` in order.

    Raises ValueError when ``data`` is empty.
    """
    values = list(data)
    if not values:
        raise ValueError("cannot build a list from no values")
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def display_list(head: ListNode | None) -> str:
    """The list's values written one after another with no separator."""
    return "".join(str(value) for value in _values(head))


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(_values(l1), _values(l2), fillvalue=0):
        total = a + b + carry
        carry = 0
        if total >= 10:
            total -= 10
            carry = 1
        tail.next = ListNode(total)
        tail = tail.next
    if carry:
        tail.next = ListNode(1)
    return dummy.next if dummy.next is not None else ListNode(0)