"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


# (drow, dcol) pairs
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (2, -1),
    (2, 1),
    (-1, -2),
    (1, -2),
    (-1, 2),
    (1, 2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# color -> (forward step, start row, promotion row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 2, 8),
    Color.BLACK: (-1, 7, 1),
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = (sq.offset(dr, dc) for dr, dc in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, dc)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDING_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


class MoveGenerator:
    """Generates pseudo-legal moves and answers attack queries for a :class:`Board`.

    Read-only: the board is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, sq: Square) -> list[Move]:
        """Pseudo-legal moves of the piece on *sq* (empty if *sq* is empty)."""
        piece = self._board[sq]
        if piece is None:
            return []
        return self.moves_for(piece, sq)

    def moves_for(self, piece: Piece, sq: Square) -> list[Move]:
        """Pseudo-legal moves of *piece* standing on *sq*."""
        moves: list[Move] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_step(sq, piece.color, _KNIGHT_TARGETS[sq.index], moves)
        elif pt == PieceType.KING:
            self._gen_step(sq, piece.color, _KING_TARGETS[sq.index], moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDING_RAYS[pt][sq.index], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        Raises:
            MissingKingError: *color* has no king on the board.
        """
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Does any pseudo-legal move of *by_color* land on *sq*?"""
        for from_sq, piece in self._board.occupied(by_color):
            for move in self.moves_for(piece, from_sq):
                if move.to_sq == sq:
                    return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step, start_row, promo_row = _PAWN_GEOMETRY[color]

        one_step = sq.offset(step, 0)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promo_row, moves)
            if sq.row == start_row:
                two_step = sq.offset(2 * step, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for dcol in (-1, 1):
            cap_sq = sq.offset(step, dcol)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, promo_row, moves)

    @staticmethod
    def _add_pawn_move(
        sq: Square, to_sq: Square, promo_row: int, moves: list[Move]
    ) -> None:
        if to_sq.row == promo_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, pt))
        else:
            moves.append(Move(sq, to_sq))

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break
