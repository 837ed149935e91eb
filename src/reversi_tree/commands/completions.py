from __future__ import annotations

import typer

from reversi_tree.othello.board import DARK, LIGHT
from reversi_tree.othello.game import Game
from reversi_tree.solvers.breadth_first import expand


class Completions:
    """
    Finds every way a partially played game can finish within `depth` plies.
    """

    def __init__(self, transcript: str, depth: int) -> None:
        self.game = Game.from_text(transcript)
        self.depth = depth

    def __call__(self) -> None:
        print(f"Finding completions, starting with: {self.game.to_text()}")
        print(f"There are {self.game.board.count_empties()} open positions ...")
        print()
        self.game.show()

        finished = expand(self.game, self.depth)

        completed = 0
        wins = {DARK: 0, LIGHT: 0}
        ties = 0

        for game in finished:
            if not game.is_complete():
                continue

            completed += 1
            winner = game.winner()

            if winner is None:
                ties += 1
            else:
                wins[winner] += 1

        print()
        print(
            f"Played {len(finished)}, completed {completed} games: "
            f"Dark {wins[DARK]}, Light {wins[LIGHT]}, tied {ties}"
        )


app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def completions(
    transcript: str, depth: int = typer.Option(15, "--depth", "-d")
) -> None:
    Completions(transcript, depth)()


if __name__ == "__main__":
    app()
