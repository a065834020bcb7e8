"""Weighted union-find with path compression"""


class UnionFind:
    def __init__(self, size: int):
        self.parent = list(range(size))
        self.weight = [1] * size  # Number of cells in the tree below each root
        self.count = size  # Number of distinct sets

    def __len__(self):
        return len(self.parent)

    def find(self, i: int) -> int:
        parent = self.parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]  # Path compression (halving)
            i = parent[i]
        return i

    def union(self, i: int, j: int) -> bool:
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == root_j:
            return False  # Already in the same set

        # Weighted union: attach smaller tree under root of larger tree,
        # on a tie j's tree goes under i's root
        if self.weight[root_i] < self.weight[root_j]:
            self.parent[root_i] = root_j
            self.weight[root_j] += self.weight[root_i]
        else:
            self.parent[root_j] = root_i
            self.weight[root_i] += self.weight[root_j]

        self.count -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def weight_of(self, i: int) -> int:
        """Size of the set containing i"""
        return self.weight[self.find(i)]
