"""Square type alias and coordinate helpers.

Squares are ``(row, col)`` pairs. Row 0 is White's home row, row 7 is
Black's. Only dark squares, where ``row + col`` is even, are playable::

    A1=(0, 0), C1=(0, 2), ..., B2=(1, 1), ..., H8=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE = 8


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(sq: Square) -> bool:
    """Whether *sq* is a playable square."""
    return (sq[0] + sq[1]) % 2 == 0


def square_name(sq: Square) -> str:
    """Human-readable name: column letter + 1-based row, e.g. (1, 2) → 'C2'."""
    row, col = sq
    return chr(ord("A") + col) + str(row + 1)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((0, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((1, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((2, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((3, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((4, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((5, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((6, c) for c in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((7, c) for c in range(8))
