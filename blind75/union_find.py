"""Disjoint-set structures."""

from __future__ import annotations


class UnionFind:
    """Union-find with path compression and union by rank; tracks set count."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n
        self.count = n

    def find(self, p: int) -> int:
        root = p
        while root != self.parent[root]:
            root = self.parent[root]
        while p != self.parent[p]:
            self.parent[p], p = root, self.parent[p]
        return root

    def union(self, p: int, q: int) -> None:
        proot, qroot = self.find(p), self.find(q)
        if proot == qroot:
            return
        if self.rank[qroot] > self.rank[proot]:
            self.parent[proot] = qroot
        else:
            self.parent[qroot] = proot
            if self.rank[proot] == self.rank[qroot]:
                self.rank[proot] += 1
        self.count -= 1


class UnionFindCount:
    """Union-find tracking the size of each set and the largest union formed.

    The last element, when present in a union, always becomes the root.
    """

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.counts = [1] * n
        self.max_union_count = 0

    def find(self, p: int) -> int:
        root = p
        while root != self.parent[root]:
            root = self.parent[root]
        return root

    def union(self, p: int, q: int) -> None:
        proot, qroot = self.find(p), self.find(q)
        if proot == qroot:
            return
        last = len(self.parent) - 1
        if proot == last:
            pass
        elif qroot == last or self.counts[qroot] > self.counts[proot]:
            proot, qroot = qroot, proot
        merged = self.counts[proot] + self.counts[qroot]
        self.max_union_count = max(self.max_union_count, merged)
        self.parent[qroot] = proot
        self.counts[proot] += self.counts[qroot]