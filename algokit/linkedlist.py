"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in _nodes(head))


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _nodes(head)]


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    length = _length(head)
    if n < 1 or n > length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    steps = length - n
    if steps == 0:
        return head.next
    prev = None
    curr = head
    for _ in range(steps):
        prev, curr = curr, curr.next
    prev.next = curr.next
    return head


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; on ties ``list2`` goes first."""
    dummy = ListNode()
    tail = dummy
    first, second = list1, list2
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def delete_all_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value of a sorted list that occurs more than once."""
    dummy = ListNode(0, head)
    prev = dummy
    curr = head
    while curr is not None:
        front = curr.next
        if front is not None and front.val == curr.val:
            while front is not None and front.val == curr.val:
                front = front.next
            prev.next = front
            curr = front
        else:
            prev = curr
            curr = curr.next
    return dummy.next


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Keep one node of each run of equal values in a sorted list."""
    dummy = ListNode()
    tail = dummy
    node = head
    while node is not None:
        if node.next is not None and node.val == node.next.val:
            node = node.next
        else:
            tail.next = node
            tail = node
            node = node.next
    tail.next = None
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    probe = head
    while probe is not slow:
        probe = probe.next
        slow = slow.next
    return slow


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a list in ascending order by merge sort, relinking its nodes."""
    if head is None or head.next is None:
        return head
    prev = None
    curr = head
    for _ in range(_length(head) // 2):
        prev, curr = curr, curr.next
    prev.next = None
    return merge_two_lists(sort_list(head), sort_list(curr))


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    len_a = _length(head_a)
    len_b = _length(head_b)
    for _ in range(len_a - len_b):
        head_a = head_a.next
    for _ in range(len_b - len_a):
        head_b = head_b.next
    while head_a is not head_b:
        head_a = head_a.next
        head_b = head_b.next
    return head_a


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    prev = None
    curr = head
    while curr is not None:
        curr.next, prev, curr = prev, curr, curr.next
    return prev


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways.

    The second half of the list is left reversed in place.
    """
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    first = head
    second = reverse_list(slow.next)
    while second is not None:
        if first.val != second.val:
            return False
        first = first.next
        second = second.next
    return True


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Regroup nodes so those at odd positions precede those at even ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = odd.next.next
        odd = odd.next
        even.next = even.next.next
        even = even.next
    odd.next = even_head
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    node = head
    for _ in range(_length(head) // 2):
        node = node.next
    return node


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Unlink the middle node (the second of two) and return the head."""
    if head is None:
        raise ValueError("cannot delete the middle of an empty list")
    if head.next is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    prev = head
    while prev.next is not slow:
        prev = prev.next
    prev.next = slow.next
    return head