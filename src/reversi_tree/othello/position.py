from __future__ import annotations

from typing import Optional

NORTH = (0, -1)
NORTH_EAST = (1, -1)
EAST = (1, 0)
SOUTH_EAST = (1, 1)
SOUTH = (0, 1)
SOUTH_WEST = (-1, 1)
WEST = (-1, 0)
NORTH_WEST = (-1, -1)

# Order in which flips are collected for a move.
DIRECTIONS = [
    NORTH,
    NORTH_EAST,
    EAST,
    SOUTH_EAST,
    SOUTH,
    SOUTH_WEST,
    WEST,
    NORTH_WEST,
]

COLUMNS = "ABCDEFGH"
ROWS = "12345678"


class Position:
    """
    A square on the board. Column `x` runs from A to H, row `y` from 1 to 8.
    Squares are indexed row by row, so A1 is 0, H1 is 7 and H8 is 63.
    """

    def __init__(self, x: int, y: int) -> None:
        if x not in range(8) or y not in range(8):
            raise ValueError(f"Position out of range: ({x}, {y})")

        self.x = x
        self.y = y
        self.index = 8 * y + x

    @classmethod
    def from_index(cls, index: int) -> Position:
        if index not in range(64):
            raise ValueError(f"Index out of range: {index}")
        return ALL_POSITIONS[index]

    def neighbor(self, direction: tuple[int, int]) -> Optional[Position]:
        dx, dy = direction
        x = self.x + dx
        y = self.y + dy

        if x not in range(8) or y not in range(8):
            return None

        return ALL_POSITIONS[8 * y + x]

    def rotated(self) -> Position:
        return ALL_POSITIONS[8 * (7 - self.y) + (7 - self.x)]

    def flipped(self) -> Position:
        return ALL_POSITIONS[8 * self.x + self.y]

    def to_field(self) -> str:
        return COLUMNS[self.x] + ROWS[self.y]

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.to_field()

    def __hash__(self) -> int:
        return self.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented

        return self.index == other.index

    def __lt__(self, other: Position) -> bool:
        return self.index < other.index


ALL_POSITIONS = [Position(index % 8, index // 8) for index in range(64)]
