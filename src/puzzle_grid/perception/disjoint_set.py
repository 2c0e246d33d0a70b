"""
Union-find sur des étiquettes entières 0..n-1.
"""

from __future__ import annotations

from typing import List


class DisjointSet:
    """Partition d'entiers avec compression de chemin (halving) et union par taille."""

    def __init__(self, size: int) -> None:
        self.parent: List[int] = list(range(size))
        self.size: List[int] = [1] * size
        self.count = size

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        """Fusionne les groupes de a et b ; False s'ils étaient déjà réunis."""
        fa, fb = self.find(a), self.find(b)
        if fa == fb:
            return False
        if self.size[fa] < self.size[fb]:
            fa, fb = fb, fa
        self.parent[fb] = fa
        self.size[fa] += self.size[fb]
        self.count -= 1
        return True

    def __len__(self) -> int:
        return len(self.parent)


__all__ = ["DisjointSet"]
