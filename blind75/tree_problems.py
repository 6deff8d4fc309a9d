"""Binary tree problems."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Optional

from blind75.tree import TreeNode

_MIN_INT32 = -(2**31)


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum along any path between two nodes; 0 for an empty tree."""
    if root is None:
        return 0
    best = _MIN_INT32

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return _MIN_INT32
        left = gain(node.left)
        right = gain(node.right)
        through = max(left + node.val, right + node.val, node.val)
        best = max(best, through, left + right + node.val)
        return through

    gain(root)
    return best


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    invert_tree(root.left)
    invert_tree(root.right)
    root.left, root.right = root.right, root.left
    return root


def _inorder_values(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder_values(node.left)
    yield node.val
    yield from _inorder_values(node.right)


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """The ``k``-th smallest value of a search tree (1-based); 0 if there is none."""
    if k < 1:
        return 0
    return next(islice(_inorder_values(root), k - 1, None), 0)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Optional[TreeNode], q: Optional[TreeNode]
) -> Optional[TreeNode]:
    """The lowest node of a search tree that has both ``p`` and ``q`` beneath it."""
    node = root
    if p is None or q is None:
        return None
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """True if both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_subtree(s: Optional[TreeNode], t: Optional[TreeNode]) -> bool:
    """True if ``t`` equals ``s`` or some subtree of ``s``."""
    if is_same_tree(s, t):
        return True
    if s is None:
        return False
    return is_subtree(s.left, t) or is_subtree(s.right, t)


class TreeCodec:
    """Serializes trees as comma-terminated pre-order tokens, ``#`` for missing nodes."""

    def serialize(self, root: Optional[TreeNode]) -> str:
        if root is None:
            return ""
        tokens: list[str] = []

        def walk(node: Optional[TreeNode]) -> None:
            if node is None:
                tokens.append("#,")
                return
            tokens.append(f"{node.val},")
            walk(node.left)
            walk(node.right)

        walk(root)
        return "".join(tokens)

    def deserialize(self, data: str) -> Optional[TreeNode]:
        if not data:
            return None
        tokens = iter(data.split(","))

        def build() -> Optional[TreeNode]:
            token = next(tokens, None)
            if token is None:
                raise ValueError("serialized tree ends early")
            if token == "#":
                return None
            node = TreeNode(int(token))
            node.left = build()
            node.right = build()
            return node

        return build()