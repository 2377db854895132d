"""Errors raised by the rules engine on contract violations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.move import Move


class InvalidMoveError(ValueError):
    """A move outside the current legal-move set was applied."""

    def __init__(self, move: Move) -> None:
        super().__init__(f"Invalid move: {move}")
        self.move = move


class EmptyHistoryError(IndexError):
    """Undo was requested with no move in the history."""

    def __init__(self) -> None:
        super().__init__("No moves to undo")
