"""Islands board: stone colors plus incremental island counts"""

from enum import IntEnum
from itertools import combinations

import numpy as np
import numpy.typing as npt

from unionfind import UnionFind


class Color(IntEnum):
    BLACK = -1
    EMPTY = 0
    WHITE = 1


# Offsets (row, col) to the six neighbors of a cell:
# left, right, up, down, up-left, down-right
DELTAS = [(0, -1), (0, 1), (-1, 0), (1, 0), (-1, -1), (1, 1)]


def island_delta(k: int, connections: int) -> int:
    """Change in island count when a stone touches k same colored neighbors
    of which `connections` pairs were already connected before the move"""
    if k == 0:
        return 1  # new island
    if k == 2:
        if connections == 0:
            return -1
    elif k == 3:
        if connections == 0:
            return -2
        if connections == 1:
            return -1
    elif k == 4:
        if connections == 2 or connections == 3:
            return -1
    # 1, 5 or 6 neighbors only grow an island
    return 0


class Board:
    def __init__(self, size: int):
        S = self.size = size

        self.board: npt.NDArray[np.int8] = np.zeros(S * S, dtype=np.int8)
        self.uf = UnionFind(S * S)

        self.white_islands = 0
        self.black_islands = 0

    def index(self, r: int, c: int) -> int:
        return self.size * r + c

    def rc(self, index: int) -> tuple[int, int]:
        return index // self.size, index % self.size

    def color_of(self, r: int, c: int) -> Color:
        return Color(int(self.board[self.index(r, c)]))

    def find(self, index: int) -> int:
        return self.uf.find(index)

    def connected(self, i: int, j: int) -> bool:
        return self.uf.connected(i, j)

    @property
    def groups(self) -> int:
        """Distinct sets in the union-find, empty cells included"""
        return self.uf.count

    def island_count(self, color: Color) -> int:
        if color == Color.WHITE:
            return self.white_islands
        if color == Color.BLACK:
            return self.black_islands
        return 0

    def neighbors(self, r: int, c: int, color: Color) -> list[int]:
        """Flat indices of the in-bounds neighbors of (r, c) holding color"""
        S = self.size
        board = self.board
        index = self.index(r, c)
        result = []
        for dr, dc in DELTAS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < S and 0 <= nc < S):
                continue
            neighbor = index + dr * S + dc
            if 0 <= neighbor < len(board) and board[neighbor] == color:
                result.append(neighbor)
        return result

    def set_color(self, r: int, c: int, color: Color):
        index = self.index(r, c)
        assert self.board[index] == Color.EMPTY
        self.board[index] = color

        same = self.neighbors(r, c, color)
        k = len(same)

        # islands must be counted before this stone joins its neighbors
        if k != 1 and k < 5:
            connections = sum(
                self.uf.connected(a, b) for a, b in combinations(same, 2)
            )
            delta = island_delta(k, connections)
            if color == Color.WHITE:
                self.white_islands += delta
            else:
                self.black_islands += delta

        for neighbor in same:
            self.uf.union(index, neighbor)

    def legal_moves(self) -> npt.NDArray[np.intp]:
        return np.where(self.board == Color.EMPTY)[0]

    def __str__(self):
        chars = {Color.WHITE: "W", Color.BLACK: "B", Color.EMPTY: "_"}
        S = self.size
        lines = []
        for r in range(S):
            index = r * S
            line = " " * r + " ".join(chars[int(c)] for c in self.board[index : index + S])
            lines.append(line)
        return "\n".join(lines)
