"""Singly linked list node and conversion helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

LIST_LIMIT = 100


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"

    def get_node_with(self, val: int) -> Optional["ListNode"]:
        """Return the first node from here on whose value is ``val``."""
        node: Optional[ListNode] = self
        while node is not None and node.val != val:
            node = node.next
        return node


def list_to_ints(head: Optional[ListNode]) -> list[int]:
    """Collect the values of a list; raise if it is longer than the limit."""
    result: list[int] = []
    while head is not None:
        if len(result) >= LIST_LIMIT:
            raise ValueError(
                f"list is deeper than {LIST_LIMIT} nodes; it may contain a cycle"
            )
        result.append(head.val)
        head = head.next
    return result


def ints_to_list(nums: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``nums`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in nums:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def ints_to_list_with_cycle(nums: Iterable[int], pos: int) -> Optional[ListNode]:
    """Build a list whose tail links back to the node at index ``pos`` (-1: no cycle)."""
    head = ints_to_list(nums)
    if pos == -1:
        return head
    entry = head
    for _ in range(pos):
        if entry is None:
            break
        entry = entry.next
    if entry is None:
        raise IndexError(f"cycle position {pos} is outside the list")
    tail = entry
    while tail.next is not None:
        tail = tail.next
    tail.next = entry
    return head