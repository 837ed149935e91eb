from __future__ import annotations

from typing import Optional

from reversi_tree.othello.board import ValidMove
from reversi_tree.othello.game import Game
from reversi_tree.solvers.ordering import ForwardOrder, MoveOrdering


class Node:
    def __init__(self, game: Game, ordering: MoveOrdering) -> None:
        self.game = game
        self.moves: list[ValidMove] = ordering.arrange(game.get_valid_moves())

    def __repr__(self) -> str:
        return f"Node({self.game.to_text()!r}, {len(self.moves)} moves left)"


class Enumerator:
    """
    Depth-first backtracking search that yields every complete game reachable
    from a starting game, one per call to `produce_next()`.

    The stack holds one Node per ply of the current line. A node stays on the
    stack while it still has untried moves. Once exhausted, the enumerator
    keeps returning None; create a new one to search again.
    """

    def __init__(self, game: Game, ordering: Optional[MoveOrdering] = None) -> None:
        self.ordering = ordering or ForwardOrder()
        self.stack: list[Node] = [Node(game, self.ordering)]

    def produce_next(self) -> Optional[Game]:
        while self.stack:
            node = self.stack.pop()

            if node.moves:
                move = node.moves.pop()
                self.stack.append(node)
                self.stack.append(Node(node.game.play(move), self.ordering))
                continue

            if node.game.is_complete():
                self.__trim()
                return node.game

            # No moves, but the opponent can still play.
            self.stack.append(Node(node.game.pass_move(), self.ordering))

        return None

    def is_exhausted(self) -> bool:
        return not self.stack

    def __trim(self) -> None:
        while self.stack and not self.stack[-1].moves:
            self.stack.pop()

    def __iter__(self) -> Enumerator:
        return self

    def __next__(self) -> Game:
        game = self.produce_next()

        if game is None:
            raise StopIteration

        return game
