"""Singly linked list puzzles: digit addition and reversal in groups of k."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode.from_values({self.to_list()!r})"


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant digit first."""
    dummy = ListNode(0)
    current = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        current.next = ListNode(digit)
        current = current.next
    return dummy.next


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the nodes of the list in consecutive groups of ``k``.

    A trailing group shorter than ``k`` keeps its order.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    if head is None or k == 1:
        return head

    dummy = ListNode(0, head)
    previous_group_end = dummy
    while True:
        group_start = previous_group_end.next
        group_end = group_start
        for _ in range(k - 1):
            if group_end is None:
                return dummy.next
            group_end = group_end.next
        if group_end is None:
            return dummy.next

        next_group_start = group_end.next
        group_end.next = None
        previous_group_end.next = _reverse(group_start)
        group_start.next = next_group_start
        previous_group_end = group_start