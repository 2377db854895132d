"""High-level rules: winner and game-result detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color, GameResult
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # A side with no pieces loses. A side to move with no legal move loses
    # too, so a blocked position is a loss rather than a draw.

    @staticmethod
    def winner(position: Position) -> Color | None:
        board = position.board
        if board.count(Color.WHITE) == 0:
            return Color.BLACK
        if board.count(Color.BLACK) == 0:
            return Color.WHITE

        if not MoveGenerator(position).generate_legal_moves():
            return position.side_to_move.opposite
        return None

    @staticmethod
    def is_game_over(position: Position) -> bool:
        return Rules.winner(position) is not None

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        winner = Rules.winner(position)
        if winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.WHITE_WINS if winner == Color.WHITE else GameResult.BLACK_WINS
