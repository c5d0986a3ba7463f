"""Arena-backed disjoint-set forest used to track connectivity during maze generation."""

from __future__ import annotations

from typing import List, Optional


class DisjointSetForest:
    """Union-find over dense node ids ``0..size-1``.

    Each node's parent is an optional index into the same arena. Roots have no parent.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("DisjointSetForest size cannot be negative")
        self._parent: List[Optional[int]] = [None] * size

    def __len__(self) -> int:
        return len(self._parent)

    def is_root(self, node: int) -> bool:
        return self._parent[node] is None

    def find_root(self, node: int) -> int:
        """Follow parent links from ``node`` to the root of its tree."""
        root = node
        parent = self._parent[root]
        while parent is not None:
            root = parent
            parent = self._parent[root]
        # Path compression: point every node on the walked chain straight at the root.
        while node != root:
            next_node = self._parent[node]
            self._parent[node] = root
            node = next_node  # type: ignore[assignment]
        return root

    def try_merge(self, a: int, b: int) -> bool:
        """Merge the trees of ``a`` and ``b``, returning True if they were separate."""
        root_a = self.find_root(a)
        root_b = self.find_root(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find_root(a) == self.find_root(b)

    def component_count(self) -> int:
        return sum(1 for parent in self._parent if parent is None)
