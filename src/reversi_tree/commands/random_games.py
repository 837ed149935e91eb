from __future__ import annotations

import typer
from itertools import islice
from typing import Optional

from reversi_tree.config import get_random_seed
from reversi_tree.othello.game import Game
from reversi_tree.solvers.ordering import Seed
from reversi_tree.solvers.random_path import RandomPlayout


class RandomGames:
    def __init__(self, count: int, seed: Optional[str]) -> None:
        self.count = count
        self.seed = Seed(seed or get_random_seed())

    def __call__(self) -> None:
        playout = RandomPlayout(Game.start(), self.seed)

        for game in islice(playout, self.count):
            dark, light = game.score()
            print(f"{game.to_text()} {dark:>2}-{light:<2}")


app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def random_games(
    count: int = typer.Option(10, "--count", "-n"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s"),
) -> None:
    RandomGames(count, seed)()


if __name__ == "__main__":
    app()
