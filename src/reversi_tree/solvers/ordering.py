from __future__ import annotations

import hashlib
import random
from typing import Optional

from reversi_tree.othello.board import ValidMove

DEFAULT_SEED = "reversi"


class Seed:
    """
    Source of randomness for the random policies, derived from the SHA-256
    hash of a string so runs can be reproduced from the string alone.
    """

    def __init__(self, string: str = DEFAULT_SEED) -> None:
        self.string = string
        digest = hashlib.sha256(string.encode()).digest()
        self.value = int.from_bytes(digest, "big")

    def __repr__(self) -> str:
        return f"Seed({self.string!r})"

    def random(self) -> random.Random:
        return random.Random(self.value)


class MoveOrdering:
    """
    Arranges the moves of a node for the search stack. Moves are popped from
    the end of the returned list, so the first move to try comes last.
    """

    name = ""

    def arrange(self, moves: list[ValidMove]) -> list[ValidMove]:
        raise NotImplementedError

    def derive(self, key: str) -> MoveOrdering:
        """Returns the ordering to use for the subtree identified by `key`."""
        return self


class ForwardOrder(MoveOrdering):
    name = "forward"

    def arrange(self, moves: list[ValidMove]) -> list[ValidMove]:
        return moves[::-1]


class ReverseOrder(MoveOrdering):
    name = "reverse"

    def arrange(self, moves: list[ValidMove]) -> list[ValidMove]:
        return list(moves)


class ShuffledOrder(MoveOrdering):
    name = "random"

    def __init__(self, seed: Seed) -> None:
        self.seed = seed
        self.rng = seed.random()

    def derive(self, key: str) -> ShuffledOrder:
        # Depends only on the seed string and the key, never on earlier shuffles.
        return ShuffledOrder(Seed(f"{self.seed.string}:{key}"))

    def arrange(self, moves: list[ValidMove]) -> list[ValidMove]:
        shuffled = list(moves)
        self.rng.shuffle(shuffled)
        return shuffled


ORDERING_NAMES = [ForwardOrder.name, ReverseOrder.name, ShuffledOrder.name]


def get_ordering(name: str, seed: Optional[Seed] = None) -> MoveOrdering:
    if name == ForwardOrder.name:
        return ForwardOrder()
    if name == ReverseOrder.name:
        return ReverseOrder()
    if name == ShuffledOrder.name:
        return ShuffledOrder(seed or Seed())

    raise ValueError(f'Unknown move ordering "{name}", expected one of {ORDERING_NAMES}')
