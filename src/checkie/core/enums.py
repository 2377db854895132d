"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White moves first and starts on row 0."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def direction(self) -> int:
        """Row step of a forward pawn move."""
        return 1 if self == Color.WHITE else -1

    @property
    def promotion_row(self) -> int:
        """Row on which this color's pawns are crowned."""
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds ordered by value."""

    PAWN = 1
    QUEEN = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
