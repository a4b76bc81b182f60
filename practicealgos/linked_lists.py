"""Singly linked list problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class RandomNode:
    """A list node that also points at an arbitrary node of its list."""

    val: int
    next: Optional["RandomNode"] = None
    random: Optional["RandomNode"] = None


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding the values in order."""
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
    """The first node shared by both lists, or ``None``."""
    seen = set()
    node = head_a
    while node is not None:
        seen.add(id(node))
        node = node.next
    node = head_b
    while node is not None:
        if id(node) in seen:
            return node
        node = node.next
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Whether following ``next`` from head ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep copy of a list whose nodes carry random pointers."""
    copies: Dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next

    def copy_of(original: Optional[RandomNode]) -> Optional[RandomNode]:
        return None if original is None else copies[id(original)]

    node = head
    while node is not None:
        clone = copies[id(node)]
        clone.next = copy_of(node.next)
        clone.random = copy_of(node.random)
        node = node.next
    return copy_of(head)