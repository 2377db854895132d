"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

import pytest

from checkie.core.board import Board
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.types import Square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


PositionFactory = Callable[[dict[Square, str]], Position]


@pytest.fixture
def build_position() -> PositionFactory:
    """Build a position from ``{square: piece_char}``; White to move."""

    def _build(pieces: dict[Square, str]) -> Position:
        board = Board()
        for sq, char in pieces.items():
            board[sq] = Piece.from_char(char)
        return Position(board)

    return _build
