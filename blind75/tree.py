"""Binary tree node and helpers for building and flattening trees."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

_INT_PATTERN = re.compile(r"[+-]?\d+")


@dataclass
class TreeNode:
    """A binary tree node; equality compares whole subtrees structurally."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _atoi(text: str) -> int:
    """Parse a decimal integer, yielding 0 for anything malformed."""
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    return 0


def _pair_slots(items: Sequence) -> Iterator[tuple[int, object]]:
    yield from enumerate(items)


def _build_level_order(values: Sequence, is_null, convert) -> Optional[TreeNode]:
    if not values:
        return None
    root = TreeNode(convert(values[0]))
    queue = deque([root])
    rest = iter(values[1:])
    for left_value in rest:
        node = queue.popleft()
        if not is_null(left_value):
            node.left = TreeNode(convert(left_value))
            queue.append(node.left)
        right_value = next(rest, None)
        if right_value is None and not is_null(None):
            continue
        if right_value is not None and not is_null(right_value):
            node.right = TreeNode(convert(right_value))
            queue.append(node.right)
    return root


def ints_to_tree(ints: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing node."""
    return _build_level_order(ints, lambda v: v is None, lambda v: v)


def strings_to_tree(strs: Sequence[str]) -> Optional[TreeNode]:
    """Build a tree from level-order strings where ``"null"`` marks a missing node."""
    if not strs:
        return None
    root = TreeNode(_atoi(strs[0]))
    queue = deque([root])
    rest = iter(strs[1:])
    for left_text in rest:
        node = queue.popleft()
        if left_text != "null":
            node.left = TreeNode(_atoi(left_text))
            queue.append(node.left)
        right_text = next(rest, None)
        if right_text is not None and right_text != "null":
            node.right = TreeNode(_atoi(right_text))
            queue.append(node.right)
    return root


def get_target_node(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Return the first node (pre-order) whose value is ``target``, or ``None``."""
    if root is None or root.val == target:
        return root
    found = get_target_node(root.left, target)
    if found is not None:
        return found
    return get_target_node(root.right, target)


def _index_of(val: int, nums: Sequence[int]) -> int:
    try:
        return list(nums).index(val)
    except ValueError:
        raise ValueError(f"{val} is not present in {list(nums)}") from None


def pre_in_to_tree(pre: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order and in-order traversals."""
    if len(pre) != len(inorder):
        raise ValueError("preorder and inorder sequences differ in length")
    if not inorder:
        return None
    node = TreeNode(pre[0])
    if len(inorder) == 1:
        return node
    idx = _index_of(node.val, inorder)
    node.left = pre_in_to_tree(pre[1 : idx + 1], inorder[:idx])
    node.right = pre_in_to_tree(pre[idx + 1 :], inorder[idx + 1 :])
    return node


def in_post_to_tree(inorder: Sequence[int], post: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree from its in-order and post-order traversals."""
    if len(post) != len(inorder):
        raise ValueError("inorder and postorder sequences differ in length")
    if not inorder:
        return None
    node = TreeNode(post[-1])
    if len(inorder) == 1:
        return node
    idx = _index_of(node.val, inorder)
    node.left = in_post_to_tree(inorder[:idx], post[:idx])
    node.right = in_post_to_tree(inorder[idx + 1 :], post[idx:-1])
    return node


def tree_to_preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in pre-order."""
    if root is None:
        return []
    return [root.val, *tree_to_preorder(root.left), *tree_to_preorder(root.right)]


def tree_to_inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in in-order."""
    if root is None:
        return []
    return [*tree_to_inorder(root.left), root.val, *tree_to_inorder(root.right)]


def tree_to_postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in post-order."""
    if root is None:
        return []
    return [*tree_to_postorder(root.left), *tree_to_postorder(root.right), root.val]


def tree_to_ints(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Flatten a tree into level order with ``None`` gaps, trailing gaps removed."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
        else:
            result.append(node.val)
            queue.append(node.left)
            queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def tree_to_level_order_strings(root: Optional[TreeNode]) -> list[str]:
    """Level-order strings; children are listed only for nodes that have any."""
    answer: list[str] = []
    if root is None:
        return answer
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            answer.append("null")
            continue
        answer.append(str(node.val))
        if node.left is not None or node.right is not None:
            queue.append(node.left)
            queue.append(node.right)
    return answer


def tree_to_preorder_strings(root: Optional[TreeNode]) -> list[str]:
    """Pre-order strings produced by an explicit stack walk, with ``"null"`` markers."""
    answer: list[str] = []
    if root is None:
        return answer
    stack: list[TreeNode] = [root]
    node: Optional[TreeNode] = root
    while stack:
        if node is None:
            answer.append("null")
        while node is not None:
            answer.append(str(node.val))
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return answer