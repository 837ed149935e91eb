from __future__ import annotations

from typing import Iterable, Optional

from reversi_tree.othello.position import ALL_POSITIONS, COLUMNS, ROWS, Position

# Transcript entry for a turn in which the player had to pass.
PASS_MOVE = None

PASS_FIELD = "PP"

Transcript = tuple[Optional[Position], ...]


class MalformedTranscript(ValueError):
    pass


def field_to_entry(field: str) -> Optional[Position]:
    if len(field) != 2:
        raise MalformedTranscript(f'Invalid field length "{field}"')

    field = field.upper()

    if field == PASS_FIELD:
        return PASS_MOVE

    column, row = field

    if column not in COLUMNS:
        raise MalformedTranscript(f'Invalid column in field "{field}"')

    if row not in ROWS:
        raise MalformedTranscript(f'Invalid row in field "{field}"')

    x = COLUMNS.index(column)
    y = ROWS.index(row)
    return ALL_POSITIONS[8 * y + x]


def entry_to_field(entry: Optional[Position]) -> str:
    if entry is None:
        return PASS_FIELD
    return entry.to_field()


def from_text(text: str) -> Transcript:
    """
    Parses a transcript such as "D3C3PPB3". Lower case fields are accepted.
    """
    text = text.strip()

    if len(text) % 2 != 0:
        raise MalformedTranscript(f"Transcript has odd length {len(text)}")

    return tuple(field_to_entry(text[i : i + 2]) for i in range(0, len(text), 2))


def to_text(entries: Iterable[Optional[Position]]) -> str:
    return "".join(entry_to_field(entry) for entry in entries)
