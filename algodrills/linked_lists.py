"""Singly linked list nodes and classic list manipulations."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _iter_nodes(head)]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum likewise."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the list in consecutive groups of ``k`` nodes.

    A trailing group shorter than ``k`` keeps its order.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if head is None or k == 1:
        return head

    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        after = group_prev.next
        for _ in range(k):
            if after is None:
                return dummy.next
            after = after.next

        first = group_prev.next
        prev, current = after, first
        for _ in range(k):
            following = current.next
            current.next = prev
            prev = current
            current = following
        group_prev.next = prev
        group_prev = first


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by ``k`` places."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or head is None or head.next is None:
        return head

    nodes = list(_iter_nodes(head))
    k %= len(nodes)
    if k == 0:
        return head

    new_tail = nodes[-k - 1]
    new_head = new_tail.next
    new_tail.next = None
    nodes[-1].next = head
    return new_head


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node whose value repeats in an adjacent run, keeping the rest."""
    if head is None or head.next is None:
        return head

    dummy = ListNode(0)
    tail = dummy
    nodes = list(_iter_nodes(head))
    for _, run in groupby(nodes, key=attrgetter("val")):
        members = list(run)
        if len(members) == 1:
            tail.next = members[0]
            tail = members[0]
    tail.next = None
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` links from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False