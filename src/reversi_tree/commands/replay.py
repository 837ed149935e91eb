import typer

from reversi_tree.othello.game import Game

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def replay(transcript: str) -> None:
    game = Game.from_text(transcript)
    game.show()


if __name__ == "__main__":
    app()
