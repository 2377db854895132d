"""Position — complete game state (board + move history) with apply/undo."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.errors import EmptyHistoryError, InvalidMoveError
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.rules import Rules


class Position:
    """Board + move history + full-turn counter.

    The side to move is not stored: it is derived from the last move and
    the board, so a capture chain keeps the same mover for as long as the
    landing piece can capture again. Supports :meth:`apply` / :meth:`undo`
    via the history stack.
    """

    __slots__ = ("board", "turn", "_history")

    def __init__(self, board: Board | None = None, turn: int = 0) -> None:
        self.board = board if board is not None else Board()
        self.turn = turn
        self._history: list[Move] = []

    @classmethod
    def initial(cls, rows: int = 3) -> Position:
        """Starting position with *rows* back rows of pawns per side."""
        return cls(Board.initial(rows))

    # ── Turn state ───────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        if not self._history:
            return Color.WHITE
        last = self._history[-1]
        if last.continues and MoveGenerator(self).has_capture(last.to_sq):
            return last.color
        return last.color.opposite

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def ply(self) -> int:
        """Number of applied moves (chain steps count separately)."""
        return len(self._history)

    # ── Core move operations ─────────────────────────────────────────────

    def is_legal(self, move: Move) -> bool:
        piece = self.board[move.from_sq]
        if piece is None or piece.color != self.side_to_move:
            return False
        return move in MoveGenerator(self).generate_legal_moves()

    def apply(self, move: Move) -> None:
        """Apply *move*, raising :class:`InvalidMoveError` if it is not legal."""
        if not self.is_legal(move):
            raise InvalidMoveError(move)
        self.apply_unchecked(move)

    def push(self, move: Move) -> Color | None:
        """Apply *move* and return the winner, if the game just ended."""
        self.apply(move)
        return Rules.winner(self)

    def apply_unchecked(self, move: Move) -> None:
        """Apply a move already known to come from move generation."""
        board = self.board
        board[move.from_sq] = None
        if move.captured is not None:
            board[move.captured.square] = None
        board[move.to_sq] = Piece(move.color, move.landing_type)

        self._history.append(move)
        if self.side_to_move != move.color:
            self.turn += 1

    def undo(self) -> Move:
        """Undo the last applied move and return it."""
        if not self._history:
            raise EmptyHistoryError()

        if self.side_to_move != self._history[-1].color:
            self.turn -= 1
        move = self._history.pop()

        board = self.board
        board[move.to_sq] = None
        board[move.from_sq] = Piece(move.color, move.piece_type)
        if move.captured is not None:
            board[move.captured.square] = Piece(
                move.color.opposite, move.captured.piece_type
            )
        return move

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy including history."""
        pos = Position(board=self.board.copy(), turn=self.turn)
        pos._history = self._history.copy()
        return pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.turn == other.turn
            and self._history == other._history
            and self.board == other.board
        )

    def __repr__(self) -> str:
        header = f"#{self.turn + 1} - {self.side_to_move} to move"
        return f"{header}\n{self.board!r}"
