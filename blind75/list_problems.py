"""Linked list problems."""

from __future__ import annotations

from typing import Optional

from blind75.linked_list import ListNode


def has_cycle(head: Optional[ListNode]) -> bool:
    """True if following ``next`` from ``head`` loops back on itself."""
    fast = slow = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return the new head."""
    behind: Optional[ListNode] = None
    while head is not None:
        head.next, behind, head = behind, head, head.next
    return behind


def reorder_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: Optional[ListNode] = head
    while second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next
    return head


def reorder_list_by_array(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reorder like :func:`reorder_list`, inserting fresh nodes holding the tail values."""
    nodes: list[ListNode] = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    total = len(nodes)
    if total == 0:
        return head
    values = [n.val for n in nodes]
    kept = nodes[: (total + 1) // 2]
    followers = kept[1:] + [None]
    for i, (current, follower) in enumerate(zip(kept, followers)):
        if i < total // 2:
            current.next = ListNode(values[total - 1 - i], follower)
        else:
            current.next = None
    return head