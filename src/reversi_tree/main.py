import typer
from typing import Optional

from reversi_tree.commands.completions import Completions
from reversi_tree.commands.enumerate_games import EnumerateGames
from reversi_tree.commands.random_games import RandomGames
from reversi_tree.othello.game import Game


def enumerate_games() -> None:
    def command(
        workers: Optional[int] = typer.Option(None, "--workers", "-w"),
        depth: Optional[int] = typer.Option(None, "--depth", "-d"),
        order: str = typer.Option("forward", "--order", "-o"),
        count: bool = typer.Option(False, "--count", "-c"),
    ) -> None:
        EnumerateGames(workers, depth, order, count)()

    typer.run(command)


def completions() -> None:
    def command(
        transcript: str, depth: int = typer.Option(15, "--depth", "-d")
    ) -> None:
        Completions(transcript, depth)()

    typer.run(command)


def random_games() -> None:
    def command(
        count: int = typer.Option(10, "--count", "-n"),
        seed: Optional[str] = typer.Option(None, "--seed", "-s"),
    ) -> None:
        RandomGames(count, seed)()

    typer.run(command)


def replay() -> None:
    def command(transcript: str) -> None:
        Game.from_text(transcript).show()

    typer.run(command)
