"""Game layer — the board owner that enforces turns.

Quick start::

    from chessrules.game import Game
    from chessrules.core import Move
    from chessrules.core.types import E2, E4

    game = Game()
    game.make_move(Move(E2, E4))
"""

from chessrules.game.state import Game, MoveRecord

__all__ = [
    "Game",
    "MoveRecord",
]
