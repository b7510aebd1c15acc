"""Tests for Game."""

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import (
    IllegalMoveError,
    InvalidMoveError,
    MissingKingError,
    NoPieceOrWrongTurnError,
    SelfCheckError,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    A2, D1, D2, E1, E2, E4, E5, E7, E8, F7, G6, H8,
    parse_square,
)
from chessrules.game.state import Game


def _move(uci: str) -> Move:
    promotion = None
    if len(uci) == 5:
        promotion = Piece.from_char(uci[4].upper()).piece_type
    return Move(parse_square(uci[:2]), parse_square(uci[2:4]), promotion)


def _snapshot(game: Game) -> tuple[Board, Color, int]:
    return game.board.copy(), game.turn, len(game.history)


def perft(game: Game, depth: int) -> int:
    """Count leaf nodes at *depth* using make/undo."""
    if depth == 0:
        return 1
    nodes = 0
    for move in game.all_valid_moves():
        game.make_move(move)
        nodes += perft(game, depth - 1)
        game.undo_last_move()
    return nodes


class TestGameSetup:
    def test_defaults(self, game: Game) -> None:
        assert game.turn == Color.WHITE
        assert game.board == Board.initial()
        assert game.history == ()
        assert game.result == GameResult.IN_PROGRESS

    def test_custom_board_and_turn(self, make_board: Callable) -> None:
        board = make_board({"e1": "K", "e8": "k"})
        game = Game(board, Color.BLACK)
        assert game.board is board
        assert game.turn == Color.BLACK

    def test_turn_setter(self, game: Game) -> None:
        game.turn = Color.BLACK
        assert game.turn == Color.BLACK
        assert game.all_valid_moves() == Rules.all_legal_moves(
            game.board, Color.BLACK
        )

    def test_set_board_replaces_and_clears_history(
        self, game: Game, make_board: Callable
    ) -> None:
        game.make_move(Move(E2, E4))
        board = make_board({"e1": "K", "e8": "k"})
        game.board = board
        assert game.board is board
        assert game.history == ()
        assert game.turn == Color.BLACK

    def test_reset(self, game: Game) -> None:
        game.make_move(Move(E2, E4))
        game.reset()
        assert game.board == Board.initial()
        assert game.turn == Color.WHITE
        assert game.history == ()


class TestValidMoves:
    def test_empty_square_returns_none(self, game: Game) -> None:
        assert game.valid_moves(E4) is None

    def test_opponent_piece_can_be_queried(self, game: Game) -> None:
        moves = game.valid_moves(E7)
        assert moves == {_move("e7e6"), _move("e7e5")}

    def test_repeat_queries_equal(self, game: Game) -> None:
        assert game.valid_moves(parse_square("g1")) == game.valid_moves(
            parse_square("g1")
        )

    def test_all_valid_moves_default_to_side_to_move(self, game: Game) -> None:
        assert len(game.all_valid_moves()) == 20
        assert all(m.from_sq.row in (1, 2) for m in game.all_valid_moves())


class TestMakeMove:
    def test_opening_moves_alternate_turn(self, game: Game) -> None:
        game.make_move(_move("e2e4"))
        assert game.turn == Color.BLACK
        game.make_move(_move("e7e5"))
        assert game.turn == Color.WHITE
        assert game.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert game.board[E5] == Piece(Color.BLACK, PieceType.PAWN)
        assert game.board.is_empty(E2)
        assert game.board.is_empty(E7)

    def test_record_returned(self, game: Game) -> None:
        record = game.make_move(_move("g1f3"))
        assert record.move == _move("g1f3")
        assert record.piece == Piece(Color.WHITE, PieceType.KNIGHT)
        assert record.captured is None
        assert record.promoted_to is None
        assert game.history == (record,)

    def test_capture_recorded(self, game: Game) -> None:
        for uci in ("e2e4", "d7d5"):
            game.make_move(_move(uci))
        record = game.make_move(_move("e4d5"))
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert len(list(game.board.occupied(Color.BLACK))) == 15

    def test_opponent_piece_rejected(self, game: Game) -> None:
        before = _snapshot(game)
        with pytest.raises(NoPieceOrWrongTurnError, match="wrong team's turn"):
            game.make_move(_move("e7e5"))
        assert _snapshot(game) == before

    def test_empty_origin_rejected(self, game: Game) -> None:
        with pytest.raises(NoPieceOrWrongTurnError):
            game.make_move(_move("e4e5"))
        assert game.turn == Color.WHITE

    def test_geometry_violation_rejected(self, game: Game) -> None:
        before = _snapshot(game)
        with pytest.raises(IllegalMoveError, match="not a legal move"):
            game.make_move(_move("e2e5"))
        assert _snapshot(game) == before

    def test_king_into_rook_line_rejected(self, make_board: Callable) -> None:
        game = Game(make_board({"e1": "K", "d8": "r", "h8": "k"}))
        before = _snapshot(game)
        with pytest.raises(IllegalMoveError):
            game.make_move(Move(E1, D1))
        with pytest.raises(IllegalMoveError):
            game.make_move(Move(E1, D2))
        assert _snapshot(game) == before
        game.make_move(Move(E1, E2))
        assert game.turn == Color.BLACK

    def test_pinned_piece_rejected(self, make_board: Callable) -> None:
        game = Game(make_board({"e1": "K", "e2": "R", "e8": "r", "a8": "k"}))
        with pytest.raises(IllegalMoveError):
            game.make_move(Move(E2, A2))

    def test_errors_share_base(self, game: Game) -> None:
        with pytest.raises(InvalidMoveError) as exc_info:
            game.make_move(_move("e2e5"))
        assert exc_info.value.move == _move("e2e5")
        assert isinstance(exc_info.value, ValueError)

    def test_failed_move_can_be_retried(self, game: Game) -> None:
        with pytest.raises(IllegalMoveError):
            game.make_move(_move("e2e5"))
        game.make_move(_move("e2e4"))
        assert game.turn == Color.BLACK

    def test_self_check_reverts_and_restores_capture(
        self, make_board: Callable, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        game = Game(make_board({"e1": "K", "e2": "R", "e8": "r", "a2": "p",
                                "a8": "k"}))
        move = Move(E2, A2)
        # Let the filter wrongly approve the pinned rook's capture.
        monkeypatch.setattr(Rules, "legal_moves", staticmethod(lambda b, sq: {move}))
        before = _snapshot(game)
        with pytest.raises(SelfCheckError):
            game.make_move(move)
        assert _snapshot(game) == before
        assert game.board[A2] == Piece(Color.BLACK, PieceType.PAWN)

    def test_missing_king_is_caller_error(self, make_board: Callable) -> None:
        game = Game(make_board({"e4": "R", "h8": "k"}))
        with pytest.raises(MissingKingError):
            game.make_move(Move(E4, parse_square("e5")))
        assert game.turn == Color.WHITE

    def test_missing_king_with_blocked_piece(self, make_board: Callable) -> None:
        board = make_board({"a1": "P", "a2": "p", "h8": "k"})
        game = Game(board.copy())
        with pytest.raises(MissingKingError):
            game.make_move(Move(parse_square("a1"), A2))
        assert game.board == board
        assert game.turn == Color.WHITE


class TestPromotion:
    def test_four_choices(self, make_board: Callable) -> None:
        game = Game(make_board({"e7": "P", "a1": "K", "h1": "k"}))
        moves = game.valid_moves(E7)
        assert moves is not None
        assert len(moves) == 4
        assert {m.promotion for m in moves} == {
            PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT,
        }

    def test_promotion_replaces_pawn(self, make_board: Callable) -> None:
        game = Game(make_board({"e7": "P", "a1": "K", "h1": "k"}))
        record = game.make_move(Move(E7, E8, PieceType.KNIGHT))
        assert game.board[E8] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert game.board.is_empty(E7)
        assert record.promoted_to == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_plain_push_to_back_rank_rejected(self, make_board: Callable) -> None:
        game = Game(make_board({"e7": "P", "a1": "K", "h1": "k"}))
        with pytest.raises(IllegalMoveError):
            game.make_move(Move(E7, E8))

    def test_undo_restores_pawn(self, make_board: Callable) -> None:
        board = make_board({"e7": "P", "a1": "K", "h1": "k"})
        game = Game(board.copy())
        game.make_move(Move(E7, E8, PieceType.QUEEN))
        game.undo_last_move()
        assert game.board == board
        assert game.turn == Color.WHITE


class TestUndo:
    def test_undo_restores(self, game: Game) -> None:
        game.make_move(_move("e2e4"))
        undone = game.undo_last_move()
        assert undone == _move("e2e4")
        assert game.board == Board.initial()
        assert game.turn == Color.WHITE
        assert game.history == ()

    def test_undo_restores_capture(self, game: Game) -> None:
        for uci in ("e2e4", "d7d5", "e4d5"):
            game.make_move(_move(uci))
        game.undo_last_move()
        assert game.board[parse_square("d5")] == Piece(Color.BLACK, PieceType.PAWN)
        assert game.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert game.turn == Color.WHITE

    def test_undo_empty_returns_none(self, game: Game) -> None:
        assert game.undo_last_move() is None


class TestEndings:
    def test_fools_mate(self, game: Game) -> None:
        for uci in ("f2f3", "e7e5", "g2g4", "d8h4"):
            game.make_move(_move(uci))
        assert game.is_in_check(Color.WHITE)
        assert game.is_in_checkmate(Color.WHITE)
        assert not game.is_in_stalemate(Color.WHITE)
        assert game.all_valid_moves() == set()
        assert game.result == GameResult.BLACK_WINS

    def test_rook_mate_and_stalemate(self, make_board: Callable) -> None:
        game = Game(make_board({"f7": "K", "g6": "P", "a8": "R", "h8": "k"}))
        assert game.is_in_checkmate(Color.BLACK)

        game.board.remove_piece(parse_square("a8"))
        assert not game.is_in_check(Color.BLACK)
        assert not game.is_in_checkmate(Color.BLACK)
        assert game.is_in_stalemate(Color.BLACK)

    def test_stalemate_is_structural(self, make_board: Callable) -> None:
        game = Game(make_board({"f7": "K", "g6": "P", "h8": "k"}), Color.WHITE)
        assert game.is_in_stalemate(Color.BLACK)
        assert game.result == GameResult.IN_PROGRESS

    def test_stalemate_by_move(self, make_board: Callable) -> None:
        game = Game(make_board({"f7": "K", "g5": "P", "h8": "k"}))
        game.make_move(Move(parse_square("g5"), G6))
        assert game.turn == Color.BLACK
        assert game.board[G6] == Piece(Color.WHITE, PieceType.PAWN)
        assert game.board[F7] == Piece(Color.WHITE, PieceType.KING)
        assert game.is_in_stalemate(Color.BLACK)
        assert game.valid_moves(H8) == set()
        assert game.result == GameResult.DRAW


class TestPerft:
    def test_depth_1(self, game: Game) -> None:
        assert perft(game, 1) == 20

    def test_depth_2(self, game: Game) -> None:
        assert perft(game, 2) == 400
        assert game.board == Board.initial()

    @pytest.mark.slow
    def test_depth_3(self, game: Game) -> None:
        assert perft(game, 3) == 8_902
