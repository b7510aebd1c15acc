"""High-level chess rules: legality filter, check, checkmate, stalemate, game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move
    from chessrules.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Not modelled: castling, en passant, repetition and move-count draws.

    @staticmethod
    def legal_moves(board: Board, sq: Square) -> set[Move] | None:
        """Legal moves of the piece on *sq*, or ``None`` if *sq* is empty.

        Each pseudo-legal move is tried on a scratch copy of *board*: the moving
        piece (never its promoted form) goes to the destination, the origin is
        cleared, and the move is kept iff the mover's king is not attacked.

        Raises:
            MissingKingError: the mover has no king on *board*.
        """
        piece = board[sq]
        if piece is None:
            return None
        board.king_square(piece.color)

        legal: set[Move] = set()
        for move in piece.pseudo_moves(board, sq):
            scratch = board.copy()
            scratch[move.to_sq] = piece
            scratch[move.from_sq] = None
            if not MoveGenerator(scratch).is_in_check(piece.color):
                legal.add(move)
        return legal

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> set[Move]:
        """Legal moves of every *color* piece on *board*."""
        legal: set[Move] = set()
        for sq, _ in list(board.occupied(color)):
            legal |= Rules.legal_moves(board, sq) or set()
        return legal

    @staticmethod
    def has_legal_moves(board: Board, color: Color) -> bool:
        for sq, _ in list(board.occupied(color)):
            if Rules.legal_moves(board, sq):
                return True
        return False

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_moves(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        """*color* is not in check and has no legal move.

        Deliberately structural: whose turn it is plays no part.
        """
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_moves(board, color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the current game result."""
        if Rules.has_legal_moves(board, side_to_move):
            return GameResult.IN_PROGRESS

        if Rules.is_in_check(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
