"""GameController — drives a draughts game from setup to result.

Coordinates: Position, Rules, the engine.
Emits events via simple callbacks so a front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.engine.search import IEngine, SearchEngine

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 100

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Color, Position], None]  # move, mover, position
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, tracks the result,
    notifies listeners.

    A game that reaches *max_turns* full turns without a winner is a draw.
    """

    __slots__ = ("_position", "_engine", "_max_turns", "_result", "events")

    def __init__(
        self,
        engine: IEngine | None = None,
        max_turns: int = DEFAULT_MAX_TURNS,
    ) -> None:
        self._engine = engine or SearchEngine()
        self._max_turns = max_turns
        self._position = Position.initial()
        self._result = GameResult.IN_PROGRESS
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result != GameResult.IN_PROGRESS

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, rows: int = 3, position: Position | None = None) -> None:
        """Start over from the initial setup, or from a copy of *position*."""
        self._position = position.copy() if position is not None else Position.initial(rows)
        self._result = GameResult.IN_PROGRESS
        self._update_result()

    def submit_move(self, move: Move) -> bool:
        if self.is_game_over:
            return False
        if not self._position.is_legal(move):
            return False

        mover = self._position.side_to_move
        self._position.apply_unchecked(move)
        _LOGGER.info("#%d %s played %s", self._position.turn, mover, move)

        for cb in self.events.on_move:
            cb(move, mover, self._position)

        self._update_result()
        return True

    def undo_move(self) -> bool:
        if not self._position.ply:
            return False
        self._position.undo()
        self._result = GameResult.IN_PROGRESS
        self._update_result()
        return True

    def play_engine_move(self) -> Move | None:
        """Let the engine move for the side to move."""
        if self.is_game_over:
            return None
        move = self._engine.search(self._position).best_move
        if move is None or not self.submit_move(move):
            return None
        return move

    def play_to_end(self) -> GameResult:
        """Engine plays both sides until a winner or the turn limit."""
        while not self.is_game_over:
            if self.play_engine_move() is None:
                break
        return self._result

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_result(self) -> None:
        result = Rules.game_result(self._position)
        if result == GameResult.IN_PROGRESS and self._position.turn >= self._max_turns:
            result = GameResult.DRAW
        if result == GameResult.IN_PROGRESS:
            return

        self._result = result
        _LOGGER.info("Game over after %d turns: %s", self._position.turn, result.name)
        for cb in self.events.on_game_over:
            cb(result)
