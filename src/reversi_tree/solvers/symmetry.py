from __future__ import annotations

from reversi_tree.othello.game import Game
from reversi_tree.othello.transcript import Transcript

# The starting board looks the same after a 180 degree rotation and after a
# mirror over the A1-H8 diagonal, so each game has three equivalent games.


def rotate(transcript: Transcript) -> Transcript:
    return tuple(None if entry is None else entry.rotated() for entry in transcript)


def flip(transcript: Transcript) -> Transcript:
    return tuple(None if entry is None else entry.flipped() for entry in transcript)


def symmetrical(transcript: Transcript) -> list[Transcript]:
    """
    Returns the transcript, its rotation, its mirror image and its rotated
    mirror image, in that order.
    """
    rotated = rotate(transcript)
    return [tuple(transcript), rotated, flip(transcript), flip(rotated)]


def symmetrical_games(game: Game) -> list[Game]:
    rotated = Game(game.board.rotated(), game.turn, rotate(game.transcript))
    flipped = Game(game.board.flipped(), game.turn, flip(game.transcript))
    rotated_flipped = Game(
        rotated.board.flipped(), game.turn, flip(rotated.transcript)
    )
    return [game, rotated, flipped, rotated_flipped]
