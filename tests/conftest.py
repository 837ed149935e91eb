import pytest

from reversi_tree.othello.game import Game

FIRST_GAME = "D3C3B3B2B1A1C4C1C2D2D1E1A2A3F5E2F1G1PPF2PPE3PPB5B4A5A4C5A6F4F3G3G2H2H1H3H4G4C6G5H5B6C7D6E6F6G6H6H7A7PPB7A8D7E7F7G7G8B8C8D8E8F8H8"

# First game without its last five moves, leaving five empty squares.
NEAR_END = FIRST_GAME[:-10]

NINE_MOVES = "E6F4E3F6G5D6E7F5C5"


@pytest.fixture
def near_end_game() -> Game:
    return Game.from_text(NEAR_END)
