"""Tests for winner and game-result detection."""

from checkie.core.enums import Color, GameResult, PieceType
from checkie.core.move import Move
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import A1, B2, C3, F6, G1, G7, H2, H8


class TestWinner:
    def test_game_in_progress(self) -> None:
        pos = Position.initial(3)
        assert Rules.winner(pos) is None
        assert not Rules.is_game_over(pos)
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS

    def test_side_without_pieces_loses(self, build_position) -> None:
        assert Rules.winner(build_position({C3: "P"})) == Color.WHITE
        assert Rules.winner(build_position({C3: "p"})) == Color.BLACK

    def test_empty_board_goes_to_black(self) -> None:
        assert Rules.winner(Position()) == Color.BLACK

    def test_blocked_side_to_move_loses(self, build_position) -> None:
        pos = build_position({A1: "P", B2: "p", C3: "p"})
        assert Rules.winner(pos) == Color.BLACK
        assert Rules.game_result(pos) == GameResult.BLACK_WINS

    def test_blocked_black_loses_after_white_moves(self, build_position) -> None:
        pos = build_position({G1: "P", F6: "P", G7: "P", H8: "p"})
        assert Rules.winner(pos) is None

        winner = pos.push(Move(G1, H2, PieceType.PAWN, Color.WHITE))
        assert winner == Color.WHITE
        assert Rules.game_result(pos) == GameResult.WHITE_WINS
        assert Rules.is_game_over(pos)
