"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from checkie.core.enums import Color, PieceType
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Square, is_dark, square_name

_COLOR_COUNT = 2
_MAX_START_ROWS = BOARD_SIZE // 2


class Board:
    """Mutable 8x8 grid with incremental per-color occupancy."""

    __slots__ = ("_squares", "_occupied")

    def __init__(self) -> None:
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> occupied squares of that color.
        self._occupied: list[set[Square]] = [set() for _ in range(_COLOR_COUNT)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        old_piece = self._squares[row][col]
        if old_piece == piece:
            return
        if piece is not None and not is_dark(sq):
            raise ValueError(f"Pieces only stand on dark squares, not {square_name(sq)}")

        if old_piece is not None:
            self._occupied[int(old_piece.color)].discard(sq)

        self._squares[row][col] = piece

        if piece is not None:
            self._occupied[int(piece.color)].add(sq)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in row-major order."""
        return sorted(self._occupied[int(color)])

    def count(self, color: Color) -> int:
        """Number of pieces *color* has left."""
        return len(self._occupied[int(color)])

    # -- Copying -----------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = [row.copy() for row in self._squares]
        b._occupied = [occ.copy() for occ in self._occupied]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, rows: int = 3) -> Board:
        """Starting position with *rows* back rows of pawns per side."""
        if not 0 <= rows <= _MAX_START_ROWS:
            raise ValueError(f"Starting rows must be in 0..{_MAX_START_ROWS}, got {rows}")

        b = cls()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2:
                    continue
                if row < rows:
                    b[(row, col)] = Piece(Color.WHITE, PieceType.PAWN)
                elif row >= BOARD_SIZE - rows:
                    b[(row, col)] = Piece(Color.BLACK, PieceType.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  A B C D E F G H")
        return "\n".join(rows)
