"""Game — board ownership, turn tracking and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import (
    IllegalMoveError,
    NoPieceOrWrongTurnError,
    SelfCheckError,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)
_PROMOTION_ROWS = (1, 8)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    promoted_to: Piece | None = None


class Game:
    """A chess game: one board, the side to move and the applied moves.

    Methods are meant to be called from a single thread; a board must not be
    shared between games.
    """

    __slots__ = ("_board", "_turn", "_history")

    def __init__(self, board: Board | None = None, turn: Color = Color.WHITE) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = turn
        self._history: list[MoveRecord] = []

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        """Whose turn it is."""
        return self._turn

    @turn.setter
    def turn(self, color: Color) -> None:
        self._turn = color

    @property
    def board(self) -> Board:
        return self._board

    @board.setter
    def board(self, board: Board) -> None:
        self.set_board(board)

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def result(self) -> GameResult:
        """Outcome for the side to move (checkmate, stalemate or in progress)."""
        return Rules.game_result(self._board, self._turn)

    def set_board(self, board: Board) -> None:
        """Replace the whole board, e.g. with a loaded position.

        The turn is kept; the move history is dropped.
        """
        self._board = board
        self._history.clear()
        _LOGGER.debug("Board replaced; %s to move", self._turn)

    def reset(self) -> None:
        """Standard starting position, WHITE to move, empty history."""
        self._board = Board.initial()
        self._turn = Color.WHITE
        self._history.clear()
        _LOGGER.debug("Game reset")

    # ── Queries ──────────────────────────────────────────────────────────

    def valid_moves(self, square: Square) -> set[Move] | None:
        """Legal moves for the piece on *square*.

        Returns ``None`` when *square* is empty and an empty set when the
        piece there has no legal move. Turn is not consulted.
        """
        return Rules.legal_moves(self._board, square)

    def all_valid_moves(self, color: Color | None = None) -> set[Move]:
        """Legal moves of every piece of *color* (default: side to move)."""
        if color is None:
            color = self._turn
        return Rules.all_legal_moves(self._board, color)

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self._board, color)

    def is_in_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self._board, color)

    def is_in_stalemate(self, color: Color) -> bool:
        """*color* is not in check and has no legal move, whoever is to move."""
        return Rules.is_stalemate(self._board, color)

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> MoveRecord:
        """Apply *move* for the side to move and return the history record.

        Raises:
            NoPieceOrWrongTurnError: origin is empty or holds the other side's piece.
            IllegalMoveError: *move* is not a legal move of that piece.
            SelfCheckError: the mover's king is attacked after applying *move*.
            MissingKingError: the side to move has no king on the board.

        On any error board, turn and history are left untouched.
        """
        board = self._board
        start, end = move.from_sq, move.to_sq
        piece = board[start]

        if piece is None or piece.color != self._turn:
            _LOGGER.debug("Rejected %s: no %s piece on %s", move, self._turn, start)
            raise NoPieceOrWrongTurnError(move, "no piece or wrong team's turn")

        legal = self.valid_moves(start)
        if legal is None or move not in legal:
            _LOGGER.debug("Rejected %s: not a legal move", move)
            raise IllegalMoveError(move, "not a legal move")

        captured = board[end]
        board[start] = None
        placed = piece
        if (
            piece.piece_type == PieceType.PAWN
            and end.row in _PROMOTION_ROWS
            and move.promotion is not None
        ):
            placed = Piece(piece.color, move.promotion)
        board[end] = placed

        if Rules.is_in_check(board, piece.color):
            board[end] = captured
            board[start] = piece
            _LOGGER.error(
                "Legal move %s left the %s king in check; reverted", move, piece.color
            )
            raise SelfCheckError(move, "move leaves the king in check")

        self._turn = self._turn.opposite
        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            promoted_to=placed if placed is not piece else None,
        )
        self._history.append(record)
        _LOGGER.debug("Applied %s (%s); %s to move", move, piece, self._turn)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self._history:
            return None

        record = self._history.pop()
        self._board[record.move.to_sq] = record.captured
        self._board[record.move.from_sq] = record.piece
        self._turn = self._turn.opposite
        _LOGGER.debug("Undid %s; %s to move", record.move, self._turn)
        return record.move
