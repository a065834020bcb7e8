"""Game controller for Islands: legality, edge tracking and win detection

White connects the top and bottom rows, Black the left and right columns.
The score for each player is the number of islands they have on the board.
"""

from islandboard import Board, Color


class IslandGame:
    def __init__(self, size: int, verbose: bool = False):
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.board = Board(size)
        self.size = size
        self.verbose = verbose
        self.winner: Color | None = None

        self.moves = {Color.WHITE: 0, Color.BLACK: 0}
        # which of its two edges each player has played on
        self.touched = {
            Color.WHITE: [False, False],  # top, bottom
            Color.BLACK: [False, False],  # left, right
        }

    @staticmethod
    def opponent(color: Color) -> Color:
        return Color.BLACK if color == Color.WHITE else Color.WHITE

    def can_play(self, row: int, col: int) -> bool:
        S = self.size
        if not (0 <= row < S and 0 <= col < S):
            raise ValueError(f"({row}, {col}) is off a {S}x{S} board")
        return self.board.color_of(row, col) == Color.EMPTY

    def edge_cells(self, color: Color) -> tuple[range, range]:
        """Flat indices of the two edges color must connect"""
        S = self.size
        if color == Color.WHITE:
            return range(0, S), range(S * (S - 1), S * S)
        return range(0, S * S, S), range(S - 1, S * S, S)

    def make_move(self, row: int, col: int, color: Color) -> bool:
        """Play color at (row, col), return True if the move wins"""
        color = Color(color)
        if color == Color.EMPTY:
            raise ValueError("cannot play an empty stone")
        if not self.can_play(row, col):
            self.log(f"{color.name} at ({row}, {col}) is occupied")
            return False

        S = self.size
        touched = self.touched[color]
        line = row if color == Color.WHITE else col
        if line == 0 and not touched[0]:
            touched[0] = True
            self.log(f"{color.name} reached its first edge")
        if line == S - 1 and not touched[1]:
            touched[1] = True
            self.log(f"{color.name} reached its second edge")

        self.moves[color] += 1
        self.board.set_color(row, col, color)
        self.log(
            f"{color.name} plays ({row}, {col}): "
            f"white {self.white_score()} black {self.black_score()}"
        )

        # a crossing needs both edges and at least one stone per line
        if not all(touched) or self.moves[color] < S:
            return False

        index = self.board.index(row, col)
        first, second = self.edge_cells(color)
        connected = self.board.connected
        if any(connected(index, i) for i in first) and any(
            connected(index, j) for j in second
        ):
            if self.winner is None:
                self.winner = color
            self.log(f"{color.name} wins after {self.moves[color]} moves")
            return True
        return False

    def moves_made(self, color: Color) -> int:
        return self.moves.get(color, 0)

    def white_score(self) -> int:
        return self.board.island_count(Color.WHITE)

    def black_score(self) -> int:
        return self.board.island_count(Color.BLACK)

    def log(self, *args, **kwargs):
        if self.verbose:
            print(*args, **kwargs)

    def __str__(self):
        return str(self.board)
