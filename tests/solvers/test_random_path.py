from itertools import islice

from reversi_tree.othello.game import Game
from reversi_tree.solvers.ordering import Seed
from reversi_tree.solvers.random_path import RandomPlayout

from conftest import NEAR_END, NINE_MOVES


def test_solve_completes() -> None:
    game = RandomPlayout(Game.start()).solve()

    assert game.is_complete()
    assert Game.from_transcript(game.transcript) == game


def test_same_seed_same_games() -> None:
    first = [game.to_text() for game in islice(RandomPlayout(Game.start(), Seed("x")), 3)]
    second = [game.to_text() for game in islice(RandomPlayout(Game.start(), Seed("x")), 3)]

    assert first == second


def test_stream_varies() -> None:
    games = {game.to_text() for game in islice(RandomPlayout(Game.start()), 5)}
    assert len(games) > 1


def test_starts_from_game() -> None:
    game = RandomPlayout(Game.from_text(NEAR_END)).solve()
    assert game.to_text().startswith(NEAR_END)


def test_complete_game() -> None:
    game = Game.from_text(NINE_MOVES)
    assert RandomPlayout(game).solve() == game
