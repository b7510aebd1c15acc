"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Rules
    from chessrules.core.types import E2

    board = Board.initial()
    for move in Rules.legal_moves(board, E2):
        print(move)
"""

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
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import ALL_SQUARES, Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Errors
    "IllegalMoveError",
    "InvalidMoveError",
    "MissingKingError",
    "NoPieceOrWrongTurnError",
    "SelfCheckError",
]
