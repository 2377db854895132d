"""Exhaustive minimax search over in-place apply/undo."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from checkie.core.enums import Color
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.engine.config import RateConfig
from checkie.engine.evaluate import Evaluator

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.core.position import Position

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = float("inf")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(self, position: Position) -> SearchResult: ...


class SearchEngine(IEngine):
    """Negamax to a fixed number of full turns, without pruning.

    Each root move is scored as the negated rating of the position it
    leads to, searched from depth 0 for whoever moves next. Below the root
    a capture chain is searched at the depth it started on and its score
    is not negated, since the same side keeps moving. Depth advances and
    the score flips only when the side to move changes.
    """

    __slots__ = ("config", "_evaluator", "_nodes")

    def __init__(self, config: RateConfig | None = None) -> None:
        self.config = config or RateConfig()
        self._evaluator = Evaluator(self.config)
        self._nodes = 0

    def search(self, position: Position) -> SearchResult:
        self._nodes = 0
        player = position.side_to_move

        winner = Rules.winner(position)
        if winner is not None:
            score = self.config.win if winner == player else -self.config.win
            return SearchResult(None, score, 0, self._nodes)

        best_move: Move | None = None
        best_score = -_INF_SCORE
        for move in MoveGenerator(position).generate_legal_moves():
            position.apply_unchecked(move)
            # Negated even when the move keeps the turn in a capture chain.
            score = -self._rate(position, position.side_to_move, 0)
            position.undo()
            if best_move is None or score > best_score:
                best_move = move
                best_score = score

        _LOGGER.debug(
            "%s plays %s (score %.2f, %d nodes)",
            player,
            best_move,
            best_score,
            self._nodes,
        )
        return SearchResult(best_move, best_score, self.config.max_depth, self._nodes)

    def find_best_move(self, position: Position) -> Move | None:
        """Best move for the side to move, or ``None`` if the game is over."""
        return self.search(position).best_move

    def rate(self, position: Position) -> float:
        """Minimax score of *position* for its side to move."""
        self._nodes = 0
        return self._rate(position, position.side_to_move, 0)

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def _score_move(
        self,
        position: Position,
        move: Move,
        player: Color,
        depth: int,
    ) -> float:
        position.apply_unchecked(move)
        next_player = position.side_to_move
        if next_player == player:
            score = self._rate(position, player, depth)
        else:
            score = -self._rate(position, next_player, depth + 1)
        position.undo()
        return score

    def _rate(self, position: Position, player: Color, depth: int) -> float:
        # *player* is always the side to move here.
        self._nodes += 1
        board = position.board
        win = self.config.win

        if board.count(player) == 0:
            return -win
        if board.count(player.opposite) == 0:
            return win

        moves = MoveGenerator(position).generate_legal_moves()
        if not moves:
            return -win

        if depth >= self.config.max_depth:
            return self._evaluator.evaluate(position)

        best_score = -_INF_SCORE
        for move in moves:
            score = self._score_move(position, move, player, depth)
            if score > best_score:
                best_score = score
        return best_score
