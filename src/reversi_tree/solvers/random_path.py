from __future__ import annotations

from typing import Optional

from reversi_tree.othello.game import Game
from reversi_tree.solvers.ordering import Seed


class RandomPlayout:
    """
    Follows a single random line from `game` to the end. Iterating yields an
    endless stream of such games, all drawn from the same random source.
    """

    def __init__(self, game: Game, seed: Optional[Seed] = None) -> None:
        self.game = game
        self.seed = seed or Seed()
        self.rng = self.seed.random()

    def solve(self) -> Game:
        game = self.game

        while not game.is_complete():
            valid_moves = game.get_valid_moves()

            if valid_moves:
                game = game.play(self.rng.choice(valid_moves))
            else:
                game = game.pass_move()

        return game

    def __iter__(self) -> RandomPlayout:
        return self

    def __next__(self) -> Game:
        return self.solve()
