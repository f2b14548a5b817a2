import numpy as np


class UnionFind:
    """
    Disjoint-set forest over the elements 0..n-1.

    Trees are kept shallow with union by size and path compression, so find
    and merge run in amortized O(alpha(n)). The forest lives in two flat
    numpy arrays: `id[x]` is the parent of x (a root points to itself) and
    `size[r]` is the number of elements under root r.
    """
    __slots__ = ['id', 'size', 'nb_subsets']

    def __init__(self, n: int):
        self.id = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self.nb_subsets = n

    def __len__(self) -> int:
        return self.id.shape[0]

    def copy(self) -> 'UnionFind':
        """
        Deep snapshot. Contraction branches diverging from the same state must
        each work on their own copy.
        """
        other = UnionFind.__new__(UnionFind)
        other.id = self.id.copy()
        other.size = self.size.copy()
        other.nb_subsets = self.nb_subsets
        return other

    def find(self, x: int) -> int:
        root = x
        while root != self.id[root]:
            root = self.id[root]

        # path compression
        curr = x
        while curr != root:
            nxt = self.id[curr]
            self.id[curr] = root
            curr = nxt
        return int(root)

    def merge(self, x: int, y: int) -> bool:
        """
        Unites the subsets of x and y. Returns False if they were already one.
        """
        i = self.find(x)
        j = self.find(y)
        if i == j:
            return False

        if self.size[i] < self.size[j]:
            self.id[i] = j
            self.size[j] += self.size[i]
        else:
            self.id[j] = i
            self.size[i] += self.size[j]
        self.nb_subsets -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def roots(self) -> np.ndarray:
        """
        Root of every element, computed without touching the forest.
        """
        labels = self.id.copy()
        # pointer jumping until every label is a fixed point
        while True:
            nxt = labels[labels]
            if np.array_equal(nxt, labels):
                return labels
            labels = nxt
