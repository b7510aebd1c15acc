"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square
from chessrules.game.state import Game


@pytest.fixture
def make_board() -> Callable[[Mapping[str, str]], Board]:
    """Build a board from ``{"e1": "K", "e8": "k", ...}``."""

    def _make(placement: Mapping[str, str]) -> Board:
        return Board.from_pieces(
            {parse_square(name): Piece.from_char(ch) for name, ch in placement.items()}
        )

    return _make


@pytest.fixture
def game() -> Game:
    """Fresh game from the standard starting position."""
    return Game()
