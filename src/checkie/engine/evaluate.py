"""Static evaluation: material, placement and capture threats."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color, PieceType
from checkie.core.move_generator import MoveGenerator
from checkie.engine.config import RateConfig

if TYPE_CHECKING:
    from checkie.core.position import Position


def _centered(v: int) -> int:
    """1 on the edge files/rows, rising by one per step up to 4 in the middle."""
    return 5 - (abs(v * 2 - 7) + 1) // 2


class Evaluator:
    """Scores a position from the point of view of the side to move."""

    __slots__ = ("config",)

    def __init__(self, config: RateConfig | None = None) -> None:
        self.config = config or RateConfig()

    def evaluate(self, position: Position) -> float:
        mover = position.side_to_move
        return self.side_score(position, mover) - self.side_score(
            position, mover.opposite
        )

    def side_score(self, position: Position, color: Color) -> float:
        """Material + placement + capture threats of every *color* piece."""
        cfg = self.config
        board = position.board
        gen = MoveGenerator(position)
        score = 0.0

        for sq in board.all_pieces(color):
            piece = board[sq]
            assert piece is not None
            score += cfg.material[piece.piece_type]
            score += self.placement(sq[0], sq[1], color, piece.piece_type)
            if cfg.captures.pawn or cfg.captures.queen:
                for move in gen.moves_for_square(sq, captures=True) or ():
                    assert move.captured is not None
                    score += cfg.captures[move.captured.piece_type]
        return score

    def placement(self, row: int, col: int, color: Color, piece_type: PieceType) -> float:
        """Positional value of a piece standing on ``(row, col)``."""
        weights = self.config.position
        if piece_type == PieceType.PAWN:
            advanced = row + 1 if color == Color.WHITE else 8 - row
            return advanced * weights.pawn
        return (_centered(row) + _centered(col)) * weights.queen
