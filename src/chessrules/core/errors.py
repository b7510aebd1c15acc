"""Exceptions raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move


class InvalidMoveError(ValueError):
    """A move could not be applied. The game is left unchanged."""

    def __init__(self, move: Move, reason: str) -> None:
        super().__init__(f"Invalid move {move}: {reason}")
        self.move = move
        self.reason = reason


class NoPieceOrWrongTurnError(InvalidMoveError):
    """Origin square is empty or holds a piece of the side not to move."""


class IllegalMoveError(InvalidMoveError):
    """Move is not among the legal moves of its origin square."""


class SelfCheckError(InvalidMoveError):
    """Applying the move left the mover's king attacked.

    Legal-move filtering should make this unreachable; seeing it means the
    filter and the post-move check disagree.
    """


class MissingKingError(ValueError):
    """The board holds no king of the requested color."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color.name} king on board")
        self.color = color
