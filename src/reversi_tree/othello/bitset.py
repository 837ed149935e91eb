from __future__ import annotations

from typing import Iterator

BITSET_MASK = 0xFFFFFFFFFFFFFFFF


def check_bits(bits: int) -> int:
    if bits & BITSET_MASK != bits:
        raise ValueError(f"Bitset out of range: {bits:#x}")
    return bits


def flip_horizontally(bits: int) -> int:
    # Mirrors columns: A <-> H
    k1 = 0x5555555555555555
    k2 = 0x3333333333333333
    k4 = 0x0F0F0F0F0F0F0F0F

    x = bits
    x = ((x >> 1) & k1) | ((x & k1) << 1)
    x = ((x >> 2) & k2) | ((x & k2) << 2)
    x = ((x >> 4) & k4) | ((x & k4) << 4)
    return x & BITSET_MASK


def flip_vertically(bits: int) -> int:
    # Mirrors rows: 1 <-> 8
    k1 = 0x00FF00FF00FF00FF
    k2 = 0x0000FFFF0000FFFF

    x = bits
    x = ((x >> 8) & k1) | ((x & k1) << 8)
    x = ((x >> 16) & k2) | ((x & k2) << 16)
    x = (x >> 32) | (x << 32)
    return x & BITSET_MASK


def flip_diagonally(bits: int) -> int:
    # Mirrors over the A1-H8 diagonal: (x, y) <-> (y, x)
    k1 = 0x5500550055005500
    k2 = 0x3333000033330000
    k4 = 0x0F0F0F0F00000000

    x = bits
    t = k4 & (x ^ (x << 28))
    x ^= t ^ (t >> 28)
    t = k2 & (x ^ (x << 14))
    x ^= t ^ (t >> 14)
    t = k1 & (x ^ (x << 7))
    x ^= t ^ (t >> 7)
    return x & BITSET_MASK


def bits_rotate(bits: int) -> int:
    """Rotates a bitset by 180 degrees."""
    return flip_vertically(flip_horizontally(bits))


def bits_flip(bits: int) -> int:
    return flip_diagonally(bits)


def count_bits(bits: int) -> int:
    return bin(bits).count("1")


def lowest_bit_index(bits: int) -> int:
    if bits == 0:
        raise ValueError

    return (bits & -bits).bit_length() - 1


def iter_bits(bits: int) -> Iterator[int]:
    """Yields indexes of set bits, lowest first."""
    while bits:
        lowest = bits & -bits
        yield lowest.bit_length() - 1
        bits ^= lowest
