from __future__ import annotations

from typing import Optional

from reversi_tree.othello.bitset import (
    BITSET_MASK,
    bits_flip,
    bits_rotate,
    check_bits,
    count_bits,
    iter_bits,
)
from reversi_tree.othello.position import ALL_POSITIONS, DIRECTIONS, Position

DARK = -1
LIGHT = 1
EMPTY = 0

# Excludes the A and H columns, so horizontal and diagonal shifts don't wrap.
INNER_COLUMNS_MASK = 0x7E7E7E7E7E7E7E7E


def opponent(disk: int) -> int:
    assert disk in [DARK, LIGHT]
    return -disk


def disk_name(disk: int) -> str:
    assert disk in [DARK, LIGHT]
    return "Dark" if disk == DARK else "Light"


class InvalidMove(Exception):
    pass


class ValidMove:
    """
    An empty square together with the opponent disks that playing it flips.
    """

    def __init__(self, position: Position, affected: list[Position]) -> None:
        if not affected:
            raise ValueError(f"Move {position} does not flip any disks")

        self.position = position
        self.affected = affected

        self.flips = 0
        for flipped in affected:
            self.flips |= 1 << flipped.index

    def __repr__(self) -> str:
        affected = " ".join(position.to_field() for position in self.affected)
        return f"ValidMove({self.position.to_field()}, [{affected}])"

    def as_tuple(self) -> tuple[Position, tuple[Position, ...]]:
        return (self.position, tuple(self.affected))

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidMove):
            raise TypeError(f"Cannot compare ValidMove with {type(other)}")

        return self.as_tuple() == other.as_tuple()


def _shifted_moves(me: int, mask: int, shift: int) -> int:
    # Flood fill over opponent disks in both directions along one axis.
    flip_l = mask & (me << shift)
    flip_l |= mask & (flip_l << shift)
    mask_l = mask & (mask << shift)
    flip_l |= mask_l & (flip_l << (2 * shift))
    flip_l |= mask_l & (flip_l << (2 * shift))

    flip_r = mask & (me >> shift)
    flip_r |= mask & (flip_r >> shift)
    mask_r = mask & (mask >> shift)
    flip_r |= mask_r & (flip_r >> (2 * shift))
    flip_r |= mask_r & (flip_r >> (2 * shift))

    return (flip_l << shift) | (flip_r >> shift)


class Board:
    """
    Board stores the discs of both players as two bitsets, indexed like
    `Position.index`. It does not know whose turn it is.
    """

    def __init__(self, dark: int, light: int) -> None:
        check_bits(dark)
        check_bits(light)

        if dark & light:
            raise ValueError("dark and light must not overlap")

        self.dark = dark
        self.light = light

    @classmethod
    def start(cls) -> Board:
        dark = 1 << 28 | 1 << 35
        light = 1 << 27 | 1 << 36
        return Board(dark, light)

    @classmethod
    def empty(cls) -> Board:
        return Board(0x0, 0x0)

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        assert len(squares) == 64

        dark = 0
        light = 0
        for index, square in enumerate(squares):
            mask = 1 << index
            if square == DARK:
                dark |= mask
            elif square == LIGHT:
                light |= mask

        return Board(dark, light)

    def __repr__(self) -> str:
        return f"Board({hex(self.dark)}, {hex(self.light)})"

    def split(self, disk: int) -> tuple[int, int]:
        """Returns the bitsets of `disk` and of its opponent."""
        if disk == DARK:
            return self.dark, self.light
        return self.light, self.dark

    def get_square(self, position: Position) -> int:
        mask = 1 << position.index
        if self.dark & mask:
            return DARK
        if self.light & mask:
            return LIGHT
        return EMPTY

    def get_moves(self, disk: int) -> int:
        me, opp = self.split(disk)
        inner = opp & INNER_COLUMNS_MASK

        moves = _shifted_moves(me, inner, 1)
        moves |= _shifted_moves(me, inner, 7)
        moves |= _shifted_moves(me, inner, 9)
        moves |= _shifted_moves(me, opp, 8)

        return moves & ~(me | opp) & BITSET_MASK

    def has_moves(self, disk: int) -> bool:
        return self.get_moves(disk) != 0

    def get_valid_move(self, position: Position, disk: int) -> Optional[ValidMove]:
        me, opp = self.split(disk)

        if (me | opp) & (1 << position.index):
            return None

        affected: list[Position] = []

        for direction in DIRECTIONS:
            run: list[Position] = []
            current = position.neighbor(direction)

            while current is not None and opp & (1 << current.index):
                run.append(current)
                current = current.neighbor(direction)

            # The run only counts when it ends on one of our own discs.
            if run and current is not None and me & (1 << current.index):
                affected.extend(run)

        if not affected:
            return None

        return ValidMove(position, affected)

    def get_valid_moves(self, disk: int) -> list[ValidMove]:
        valid_moves: list[ValidMove] = []

        for index in iter_bits(self.get_moves(disk)):
            valid_move = self.get_valid_move(ALL_POSITIONS[index], disk)
            assert valid_move is not None
            valid_moves.append(valid_move)

        return valid_moves

    def do_move(self, valid_move: ValidMove, disk: int) -> Board:
        me, opp = self.split(disk)
        move_bit = 1 << valid_move.position.index

        if (me | opp) & move_bit:
            raise InvalidMove(f"Square {valid_move.position} is not empty")

        me |= move_bit | valid_move.flips
        opp &= ~valid_move.flips

        if disk == DARK:
            return Board(me, opp)
        return Board(opp, me)

    def count(self, disk: int) -> int:
        assert disk in [DARK, LIGHT]

        if disk == DARK:
            return count_bits(self.dark)
        return count_bits(self.light)

    def count_discs(self) -> int:
        return count_bits(self.dark | self.light)

    def count_empties(self) -> int:
        return 64 - self.count_discs()

    def rotated(self) -> Board:
        return Board(bits_rotate(self.dark), bits_rotate(self.light))

    def flipped(self) -> Board:
        return Board(bits_flip(self.dark), bits_flip(self.light))

    def show(self, turn: Optional[int] = None) -> None:
        moves = 0 if turn is None else self.get_moves(turn)

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(8):
            print("{} ".format(y + 1), end="")

            for x in range(8):
                mask = 1 << (8 * y + x)

                if self.dark & mask:
                    print("○ ", end="")
                elif self.light & mask:
                    print("● ", end="")
                elif moves & mask:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    def as_tuple(self) -> tuple[int, int]:
        return (self.dark, self.light)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
