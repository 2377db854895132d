"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import MoveGenerator, Position

    pos = Position.initial(rows=3)
    for move in MoveGenerator(pos).generate_legal_moves():
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult, PieceType
from checkie.core.errors import EmptyHistoryError, InvalidMoveError
from checkie.core.move import Capture, Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import Square, in_bounds, is_dark, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "is_dark",
    "square_name",
    # Domain objects
    "Board",
    "Capture",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Errors
    "EmptyHistoryError",
    "InvalidMoveError",
]
