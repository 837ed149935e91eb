import pytest

from reversi_tree.othello.position import (
    ALL_POSITIONS,
    EAST,
    NORTH,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    WEST,
    Position,
)


def test_init_error() -> None:
    with pytest.raises(ValueError):
        Position(8, 0)

    with pytest.raises(ValueError):
        Position(0, -1)


@pytest.mark.parametrize(
    ["index", "expected"],
    [
        pytest.param(0, (0, 0), id="index-0"),
        pytest.param(7, (7, 0), id="index-7"),
        pytest.param(56, (0, 7), id="index-56"),
        pytest.param(63, (7, 7), id="index-63"),
        pytest.param(19, (3, 2), id="index-19"),
    ],
)
def test_from_index(index: int, expected: tuple[int, int]) -> None:
    position = Position.from_index(index)
    assert position.as_tuple() == expected
    assert position.index == index


def test_from_index_error() -> None:
    with pytest.raises(ValueError):
        Position.from_index(64)


@pytest.mark.parametrize(
    ["position", "expected"],
    [
        pytest.param(Position(0, 0), "A1", id="a1"),
        pytest.param(Position(7, 0), "H1", id="h1"),
        pytest.param(Position(0, 7), "A8", id="a8"),
        pytest.param(Position(3, 2), "D3", id="d3"),
    ],
)
def test_to_field(position: Position, expected: str) -> None:
    assert position.to_field() == expected


@pytest.mark.parametrize(
    ["position", "direction", "expected"],
    [
        pytest.param(Position(3, 3), NORTH, Position(3, 2), id="north"),
        pytest.param(Position(3, 3), SOUTH_EAST, Position(4, 4), id="south-east"),
        pytest.param(Position(3, 3), WEST, Position(2, 3), id="west"),
        pytest.param(Position(0, 0), NORTH, None, id="north-edge"),
        pytest.param(Position(0, 0), NORTH_WEST, None, id="corner"),
        pytest.param(Position(7, 4), EAST, None, id="east-edge"),
        pytest.param(Position(4, 7), SOUTH, None, id="south-edge"),
    ],
)
def test_neighbor(position: Position, direction: tuple[int, int], expected: Position) -> None:
    assert position.neighbor(direction) == expected


def test_rotated() -> None:
    assert Position(3, 2).rotated() == Position(4, 5)
    assert Position(0, 0).rotated() == Position(7, 7)


def test_flipped() -> None:
    assert Position(3, 2).flipped() == Position(2, 3)
    assert Position(5, 5).flipped() == Position(5, 5)


def test_involutions() -> None:
    for position in ALL_POSITIONS:
        assert position.rotated().rotated() == position
        assert position.flipped().flipped() == position


def test_equality() -> None:
    assert Position(1, 2) == Position(1, 2)
    assert Position(1, 2) != Position(2, 1)
    assert Position(1, 2) != None  # noqa: E711
    assert hash(Position(1, 2)) == hash(ALL_POSITIONS[17])
    assert sorted([Position(7, 7), Position(0, 1), Position(3, 0)]) == [
        Position(3, 0),
        Position(0, 1),
        Position(7, 7),
    ]
