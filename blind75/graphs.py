"""Graph problems."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(eq=False, repr=False)
class Node:
    """A graph node with an ordered list of neighbours."""

    val: int = 0
    neighbors: list["Node"] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Node(val={self.val!r}, neighbors={[n.val for n in self.neighbors]!r})"


def clone_graph(node: Optional[Node]) -> Optional[Node]:
    """Deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[Node, Node] = {}

    def clone(original: Node) -> Node:
        existing = copies.get(original)
        if existing is not None:
            return existing
        copy = Node(original.val)
        copies[original] = copy
        copy.neighbors = [clone(neighbor) for neighbor in original.neighbors]
        return copy

    return clone(node)


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"vertex {vertex} is outside 0..{n - 1}")


def can_finish(n: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """True if all ``n`` courses can be taken given ``[course, prerequisite]`` pairs."""
    in_degree = [0] * n
    unlocks: list[list[int]] = [[] for _ in range(n)]
    for course, required in prerequisites:
        _check_vertex(course, n)
        _check_vertex(required, n)
        in_degree[course] += 1
        unlocks[required].append(course)
    ready = deque(i for i, degree in enumerate(in_degree) if degree == 0)
    taken = 0
    while ready:
        current = ready.popleft()
        taken += 1
        for course in unlocks[current]:
            in_degree[course] -= 1
            if in_degree[course] == 0:
                ready.append(course)
    return taken == n


def valid_tree(n: int, edges: Sequence[Sequence[int]]) -> bool:
    """True if the undirected edges over ``n`` vertices form a single tree."""
    parent = list(range(n))

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    components = n
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        root_a, root_b = find(a), find(b)
        if root_a == root_b:
            return False
        parent[root_a] = root_b
        components -= 1
    return components == 1


def count_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Number of connected components among ``n`` vertices."""
    if n == 1:
        return 1
    graph: dict[int, list[int]] = {}
    for a, b in edges:
        graph.setdefault(a, []).append(b)
        graph.setdefault(b, []).append(a)
    visited: set[int] = set()
    components = 0
    for start in range(n):
        if start in visited:
            continue
        components += 1
        visited.add(start)
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbor in graph.get(current, []):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
    return components