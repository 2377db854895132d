"""Move value object.

A move is one atomic piece transition. A turn may consist of several moves
when a piece chains captures, so every move carries the mover's color.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, PieceType
from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Capture:
    """The jumped piece: enough to put it back on undo.

    Its color is always the mover's opponent.
    """

    square: Square
    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single piece transition.

    ``piece_type`` is the kind of the moving piece *before* any promotion.
    """

    from_sq: Square
    to_sq: Square
    piece_type: PieceType
    color: Color
    captured: Capture | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_upgrade(self) -> bool:
        """A pawn landing on its promotion row."""
        return (
            self.piece_type == PieceType.PAWN
            and self.to_sq[0] == self.color.promotion_row
        )

    @property
    def continues(self) -> bool:
        """Whether the turn may go on: a capture that did not promote."""
        return self.captured is not None and not self.is_upgrade

    @property
    def landing_type(self) -> PieceType:
        """Kind of the piece once it lands."""
        return PieceType.QUEEN if self.is_upgrade else self.piece_type

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        base = f"{square_name(self.from_sq)}{sep}{square_name(self.to_sq)}"
        if self.is_upgrade:
            base += "=Q"
        return base
