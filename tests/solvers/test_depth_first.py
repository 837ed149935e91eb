from reversi_tree.othello.game import Game
from reversi_tree.solvers.depth_first import Enumerator, Node
from reversi_tree.solvers.ordering import ForwardOrder, ReverseOrder, Seed, ShuffledOrder

from conftest import FIRST_GAME, NEAR_END, NINE_MOVES


def texts(games: list[Game]) -> list[str]:
    return [game.to_text() for game in games]


def test_node_moves_in_stack_order() -> None:
    node = Node(Game.start(), ForwardOrder())
    assert node.moves.pop().position.to_field() == "D3"

    node = Node(Game.start(), ReverseOrder())
    assert node.moves.pop().position.to_field() == "E6"


def test_first_game_from_start() -> None:
    enumerator = Enumerator(Game.start())
    game = enumerator.produce_next()

    assert game is not None
    assert game.to_text() == FIRST_GAME
    assert not enumerator.is_exhausted()


def test_first_game_from_near_end(near_end_game: Game) -> None:
    game = Enumerator(near_end_game).produce_next()

    assert game is not None
    assert game.to_text() == FIRST_GAME


def test_all_results_complete_and_unique(near_end_game: Game) -> None:
    games = list(Enumerator(near_end_game))

    assert len(games) > 1
    assert len(set(texts(games))) == len(games)

    for game in games:
        assert game.is_complete()
        assert game.to_text().startswith(NEAR_END)


def test_deterministic(near_end_game: Game) -> None:
    first = texts(list(Enumerator(near_end_game)))
    second = texts(list(Enumerator(near_end_game, ForwardOrder())))
    assert first == second


def test_reverse_order(near_end_game: Game) -> None:
    forward = texts(list(Enumerator(near_end_game, ForwardOrder())))
    reverse = texts(list(Enumerator(near_end_game, ReverseOrder())))

    assert reverse == forward[::-1]


def test_shuffled_order(near_end_game: Game) -> None:
    forward = texts(list(Enumerator(near_end_game, ForwardOrder())))
    shuffled = texts(list(Enumerator(near_end_game, ShuffledOrder(Seed("a")))))
    repeated = texts(list(Enumerator(near_end_game, ShuffledOrder(Seed("a")))))

    assert sorted(shuffled) == sorted(forward)
    assert shuffled == repeated


def test_exhaustion(near_end_game: Game) -> None:
    enumerator = Enumerator(near_end_game)
    count = 0

    while enumerator.produce_next() is not None:
        count += 1

    assert count > 0
    assert enumerator.is_exhausted()
    assert enumerator.produce_next() is None
    assert list(enumerator) == []


def test_complete_start() -> None:
    game = Game.from_text(NINE_MOVES)
    assert texts(list(Enumerator(game))) == [NINE_MOVES]


def test_pass_is_played() -> None:
    # Dark has no move after these moves, but Light does.
    game = Game.from_text("D3C3B3B2B1A1C4C1C2D2D1E1A2A3F5E2F1G1")
    first = Enumerator(game).produce_next()

    assert first is not None
    assert first.to_text() == FIRST_GAME
    assert first.transcript[18] is None


def test_results_replay(near_end_game: Game) -> None:
    for game in Enumerator(near_end_game):
        assert Game.from_transcript(game.transcript) == game
