"""Singly linked lists and merge sort over them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

__all__ = ["ListNode", "sort_list", "create_list", "list_values", "print_list"]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _middle(head: ListNode) -> ListNode:
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def _merge(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode()
    tail = dummy
    while left is not None and right is not None:
        if left.val < right.val:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list in ascending order by relinking its nodes."""
    if head is None or head.next is None:
        return head
    mid = _middle(head)
    right = mid.next
    mid.next = None
    return _merge(sort_list(head), sort_list(right))


def create_list(nums: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding nums in order; None if nums is empty."""
    dummy = ListNode()
    tail = dummy
    for value in nums:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def print_list(head: Optional[ListNode], file: TextIO | None = None) -> None:
    """Write each value followed by a space, then a newline (stderr by default)."""
    out = file if file is not None else sys.stderr
    out.write("".join(f"{value} " for value in list_values(head)) + "\n")