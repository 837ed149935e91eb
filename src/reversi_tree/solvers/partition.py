from __future__ import annotations

from reversi_tree.othello.game import Game
from reversi_tree.solvers.breadth_first import expand

# Every opening move is a rotation or mirror image of this one.
OPENING_MOVE = "D3"

# Transcript length of the seed games, this gives 2050 seeds.
SEED_MOVE_COUNT = 6


def opening_game() -> Game:
    return Game.from_text(OPENING_MOVE)


def partition(game: Game, plies: int) -> list[Game]:
    """
    Splits the tree below `game` into independent sub-trees, one per game
    reachable in `plies` plies. Searching every returned game covers the
    tree of `game` exactly once.
    """
    return expand(game, plies)


def seed_games(depth: int = SEED_MOVE_COUNT) -> list[Game]:
    if depth < 1:
        raise ValueError(f"Seed depth must be at least 1, got {depth}")

    opening = opening_game()
    return partition(opening, depth - len(opening.transcript))
