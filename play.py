"""Play a random game of Islands and print the running island scores"""

import argparse

import numpy as np

from islandboard import Color
from islandgame import IslandGame
from table import Table

parser = argparse.ArgumentParser(
    description="Play random moves until one player connects their edges",
)
parser.add_argument("size", type=int)
parser.add_argument("--seed", type=int)
parser.add_argument("--first", choices=["white", "black"], default="white")
parser.add_argument("--verbose", action="store_true")
parser.add_argument("--quiet", action="store_true", help="only show the result")


def play(
    size: int,
    rng: np.random.Generator,
    first: Color = Color.WHITE,
    table: Table | None = None,
    verbose: bool = False,
) -> IslandGame:
    """Alternate random legal moves until somebody wins"""
    game = IslandGame(size, verbose=verbose)
    player = first
    move = 0
    while True:
        index = int(rng.choice(game.board.legal_moves()))
        row, col = game.board.rc(index)
        win = game.make_move(row, col, player)
        move += 1
        if table is not None:
            table.print(
                move, player.name, row, col, game.white_score(), game.black_score()
            )
        if win:
            return game
        player = game.opponent(player)


def main(argv: list[str] | None = None) -> int:
    args = parser.parse_args(argv)
    if args.verbose:
        print(args)
    if args.size < 1:
        parser.error("size must be positive")

    table = None
    if not args.quiet:
        table = Table(
            ["Move", "Player", "Row", "Col", "White", "Black"],
            ["d", "", "d", "d", "d", "d"],
        )

    rng = np.random.default_rng(args.seed)
    game = play(args.size, rng, Color[args.first.upper()], table, args.verbose)

    print(game)
    assert game.winner is not None
    moves = game.moves_made(Color.WHITE) + game.moves_made(Color.BLACK)
    print(
        f"{game.winner.name} wins after {moves} moves, "
        f"islands white {game.white_score()} black {game.black_score()}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
