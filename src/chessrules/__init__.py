"""chessrules — chess move generation, legality and game-ending detection."""

from chessrules.core import (
    ALL_SQUARES,
    Board,
    Color,
    GameResult,
    IllegalMoveError,
    InvalidMoveError,
    MissingKingError,
    Move,
    MoveGenerator,
    NoPieceOrWrongTurnError,
    Piece,
    PieceType,
    Rules,
    SelfCheckError,
    Square,
    parse_square,
    square_name,
)
from chessrules.game import Game, MoveRecord

__all__ = [
    "ALL_SQUARES",
    "Board",
    "Color",
    "Game",
    "GameResult",
    "IllegalMoveError",
    "InvalidMoveError",
    "MissingKingError",
    "Move",
    "MoveGenerator",
    "MoveRecord",
    "NoPieceOrWrongTurnError",
    "Piece",
    "PieceType",
    "Rules",
    "SelfCheckError",
    "Square",
    "parse_square",
    "square_name",
]
