"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Color, PieceType
from checkie.core.move import Capture, Move
from checkie.core.types import Square, in_bounds

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.position import Position


PAWN_COL_OFFSETS: tuple[int, ...] = (-1, 1)
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    ``captures`` filters used throughout: ``None`` yields every move,
    ``True`` only captures, ``False`` only non-capturing moves.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board: Board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move.

        Captures are forced, and when a capture is available to a queen,
        pawn captures are dropped.
        """
        board = self._board
        moves: list[Move] = []
        for sq in board.all_pieces(self._pos.side_to_move):
            moves.extend(self._gen_square(sq, None))

        if not any(m.captured is not None for m in moves):
            return moves

        moves = [m for m in moves if m.captured is not None]
        if not any(m.piece_type == PieceType.QUEEN for m in moves):
            return moves
        return [m for m in moves if m.piece_type == PieceType.QUEEN]

    def moves_for_square(
        self, sq: Square, captures: bool | None = None
    ) -> list[Move] | None:
        """Pseudo-legal moves of the piece on *sq*, or ``None`` if it is empty."""
        if self._board.is_empty(sq):
            return None
        return self._gen_square(sq, captures)

    def find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The legal move going from *from_sq* to *to_sq*, if there is one."""
        for move in self.generate_legal_moves():
            if move.from_sq == from_sq and move.to_sq == to_sq:
                return move
        return None

    def has_capture(self, sq: Square) -> bool:
        """Whether the piece on *sq* can capture right now."""
        if self._board.is_empty(sq):
            return False
        return bool(self._gen_square(sq, True))

    # -- Piece-specific generators (private) -------------------------------

    def _gen_square(self, sq: Square, captures: bool | None) -> list[Move]:
        piece = self._board[sq]
        assert piece is not None
        moves: list[Move] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, captures, moves)
        else:
            self._gen_queen(sq, piece.color, captures, moves)
        return moves

    def _is_free(self, row: int, col: int) -> bool:
        return in_bounds(row, col) and self._board.is_empty((row, col))

    def _is_enemy(self, row: int, col: int, color: Color) -> bool:
        if not in_bounds(row, col):
            return False
        target = self._board[(row, col)]
        return target is not None and target.color != color

    def _gen_pawn(
        self,
        sq: Square,
        color: Color,
        captures: bool | None,
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq
        dr = color.direction

        for dc in PAWN_COL_OFFSETS:
            to_row, to_col = row + dr, col + dc
            if self._is_free(to_row, to_col):
                if captures is not True:
                    moves.append(Move(sq, (to_row, to_col), PieceType.PAWN, color))
            elif self._is_enemy(to_row, to_col, color) and self._is_free(
                to_row + dr, to_col + dc
            ):
                if captures is not False:
                    jumped = board[(to_row, to_col)]
                    assert jumped is not None
                    moves.append(
                        Move(
                            sq,
                            (to_row + dr, to_col + dc),
                            PieceType.PAWN,
                            color,
                            Capture((to_row, to_col), jumped.piece_type),
                        )
                    )

    def _gen_queen(
        self,
        sq: Square,
        color: Color,
        captures: bool | None,
        moves: list[Move],
    ) -> None:
        board = self._board
        row, col = sq

        for dr, dc in DIAGONAL_DIRS:
            r, c = row + dr, col + dc
            while self._is_free(r, c):
                if captures is not True:
                    moves.append(Move(sq, (r, c), PieceType.QUEEN, color))
                r += dr
                c += dc

            if captures is False:
                continue
            if not (self._is_enemy(r, c, color) and self._is_free(r + dr, c + dc)):
                continue

            jumped = board[(r, c)]
            assert jumped is not None
            capture = Capture((r, c), jumped.piece_type)
            land_r, land_c = r + dr, c + dc
            # Flying capture: any free square past the jumped piece.
            while self._is_free(land_r, land_c):
                moves.append(
                    Move(sq, (land_r, land_c), PieceType.QUEEN, color, capture)
                )
                land_r += dr
                land_c += dc
