"""Tests for the minimax search engine."""

import pytest

from checkie.core.enums import Color, PieceType
from checkie.core.move import Capture, Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.position import Position
from checkie.core.types import A1, A5, B4, C3, D4, E5, F4
from checkie.engine.config import KindWeights, RateConfig
from checkie.engine.search import SearchEngine

WIN = 1000.0


class TestSearchEngine:
    def test_returns_legal_move_from_start(self) -> None:
        pos = Position.initial(2)
        engine = SearchEngine(RateConfig(max_depth=1))

        result = engine.search(pos)

        assert result.best_move in MoveGenerator(pos).generate_legal_moves()
        assert result.depth == 1
        assert result.nodes > 0
        assert engine.nodes == result.nodes

    def test_search_leaves_position_untouched(self) -> None:
        pos = Position.initial(2)
        before = pos.copy()
        SearchEngine(RateConfig(max_depth=2)).search(pos)
        assert pos == before

    def test_find_best_move_matches_search(self) -> None:
        pos = Position.initial(2)
        engine = SearchEngine(RateConfig(max_depth=1))
        assert engine.find_best_move(pos) == engine.search(pos).best_move

    def test_root_move_is_rated_for_the_next_mover(self, build_position) -> None:
        # Landing on E5 keeps the turn for White, who then wins. A root move is
        # still scored as the negated rating of whoever moves next.
        pos = build_position({A1: "Q", C3: "p", F4: "p"})
        engine = SearchEngine(RateConfig(max_depth=1))

        result = engine.search(pos)

        assert result.best_move == Move(
            A1, D4, PieceType.QUEEN, Color.WHITE, Capture(C3, PieceType.PAWN)
        )
        assert result.score == 2.0

        pos.apply(
            Move(A1, E5, PieceType.QUEEN, Color.WHITE, Capture(C3, PieceType.PAWN))
        )
        assert pos.side_to_move == Color.WHITE
        assert engine.rate(pos) == WIN

    def test_avoids_losing_the_last_piece(self, build_position) -> None:
        # C3-B4 is generated first but lets A5 capture it.
        pos = build_position({C3: "P", A5: "p"})
        engine = SearchEngine(RateConfig(max_depth=1))

        result = engine.search(pos)

        assert result.best_move == Move(C3, D4, PieceType.PAWN, Color.WHITE)
        assert result.score == 0.0

        pos.apply(Move(C3, B4, PieceType.PAWN, Color.WHITE))
        assert engine.rate(pos) == WIN

    def test_decided_position_has_no_move(self, build_position) -> None:
        pos = build_position({C3: "p"})
        result = SearchEngine().search(pos)
        assert result.best_move is None
        assert result.score == -WIN

    def test_blocked_side_has_no_move(self, build_position) -> None:
        pos = build_position({A1: "P", (1, 1): "p", C3: "p"})
        engine = SearchEngine()
        assert engine.find_best_move(pos) is None
        assert engine.rate(pos) == -WIN

    def test_rate_at_depth_zero_is_static(self) -> None:
        pos = Position.initial(3)
        engine = SearchEngine(RateConfig(max_depth=0))
        assert engine.rate(pos) == 0.0

    def test_win_score_follows_config(self, build_position) -> None:
        pos = build_position({C3: "p"})
        assert SearchEngine(RateConfig(win=50.0)).search(pos).score == -50.0

    def test_depth_one_searches_the_reply(self) -> None:
        pos = Position.initial(2)
        root_moves = len(MoveGenerator(pos).generate_legal_moves())

        shallow = SearchEngine(RateConfig(max_depth=0)).search(pos)
        deep = SearchEngine(RateConfig(max_depth=1)).search(pos)

        assert shallow.nodes == root_moves
        assert deep.nodes > root_moves

    @pytest.mark.parametrize(
        ("max_depth", "target"),
        [(0, B4), (1, D4)],
    )
    def test_recapture_is_seen_from_depth_one(
        self, build_position, max_depth: int, target
    ) -> None:
        # Without threat weights only a searched reply tells the moves apart.
        pos = build_position({C3: "P", A5: "p"})
        config = RateConfig(captures=KindWeights(0.0, 0.0), max_depth=max_depth)

        move = SearchEngine(config).find_best_move(pos)

        assert move == Move(C3, target, PieceType.PAWN, Color.WHITE)

    @pytest.mark.slow
    def test_deeper_search_stays_consistent(self) -> None:
        pos = Position.initial(2)
        before = pos.copy()
        result = SearchEngine(RateConfig(max_depth=3)).search(pos)
        assert result.best_move in MoveGenerator(pos).generate_legal_moves()
        assert pos == before
