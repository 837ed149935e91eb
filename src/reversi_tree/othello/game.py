from __future__ import annotations

from typing import Iterable, Optional

from reversi_tree.othello.board import DARK, LIGHT, Board, ValidMove, disk_name, opponent
from reversi_tree.othello.position import Position
from reversi_tree.othello.transcript import PASS_MOVE, Transcript, from_text, to_text


class InvalidReplay(Exception):
    pass


class Game:
    """
    Game is an immutable snapshot of a game in progress: the board, the color
    to move and every move played so far. Playing or passing returns a new Game.
    """

    def __init__(self, board: Board, turn: int, transcript: Transcript = ()) -> None:
        assert turn in [DARK, LIGHT]

        self.board = board
        self.turn = turn
        self.transcript = transcript

    @classmethod
    def start(cls) -> Game:
        return Game(Board.start(), DARK)

    @classmethod
    def from_transcript(cls, entries: Iterable[Optional[Position]]) -> Game:
        game = cls.start()

        for entry in entries:
            if entry is None:
                if game.has_moves():
                    raise InvalidReplay(
                        f"Cannot pass with moves available after {game.to_text()}"
                    )
                game = game.pass_move()
                continue

            valid_move = game.board.get_valid_move(entry, game.turn)

            if valid_move is None:
                raise InvalidReplay(
                    f"Invalid move {entry} for {disk_name(game.turn)} after {game.to_text()}"
                )

            game = game.play(valid_move)

        return game

    @classmethod
    def from_text(cls, text: str) -> Game:
        return cls.from_transcript(from_text(text))

    def __repr__(self) -> str:
        return f"Game({self.board!r}, {disk_name(self.turn)}, {self.to_text()!r})"

    def get_valid_moves(self) -> list[ValidMove]:
        return self.board.get_valid_moves(self.turn)

    def has_moves(self) -> bool:
        return self.board.has_moves(self.turn)

    def play(self, valid_move: ValidMove) -> Game:
        board = self.board.do_move(valid_move, self.turn)
        transcript = self.transcript + (valid_move.position,)
        return Game(board, opponent(self.turn), transcript)

    def pass_move(self) -> Game:
        # Only valid without moves, which is not checked here.
        transcript = self.transcript + (PASS_MOVE,)
        return Game(self.board, opponent(self.turn), transcript)

    def is_complete(self) -> bool:
        return not (
            self.board.has_moves(self.turn)
            or self.board.has_moves(opponent(self.turn))
        )

    def score(self) -> tuple[int, int]:
        return self.board.count(DARK), self.board.count(LIGHT)

    def winner(self) -> Optional[int]:
        dark, light = self.score()

        if dark > light:
            return DARK
        if light > dark:
            return LIGHT
        return None

    def to_text(self) -> str:
        return to_text(self.transcript)

    def show(self) -> None:
        dark, light = self.score()

        if self.is_complete():
            next_turn = "Complete"
        else:
            next_turn = disk_name(self.turn)

        self.board.show(self.turn)
        print(f"Transcript: {self.to_text()}")
        print(f"Score: Dark {dark}, Light {light}")
        print(f"Next turn: {next_turn}")

    def as_tuple(self) -> tuple[Board, int, Transcript]:
        return (self.board, self.turn, self.transcript)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            raise TypeError(f"Cannot compare Game with {type(other)}")

        return self.as_tuple() == other.as_tuple()
