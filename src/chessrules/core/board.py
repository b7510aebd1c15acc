"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import MissingKingError
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board. Empty squares hold ``None``."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def get_piece(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def add_piece(self, sq: Square, piece: Piece) -> None:
        """Place *piece* on *sq*, replacing whatever was there."""
        self._squares[sq.index] = piece

    def remove_piece(self, sq: Square) -> None:
        self._squares[sq.index] = None

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` pairs, a1 first, optionally for one *color*."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied(color)
            if piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Square of *color*'s king (the first one found, scanning from a1).

        Raises:
            MissingKingError: no king of that color is on the board.
        """
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        raise MissingKingError(color)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    def reset(self) -> None:
        """Put every piece back on its standard starting square."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK, start=1):
            self[Square(1, col)] = Piece(Color.WHITE, pt)
            self[Square(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            self[Square(7, col)] = Piece(Color.BLACK, PieceType.PAWN)
            self[Square(8, col)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    @classmethod
    def from_pieces(cls, placement: Mapping[Square, Piece]) -> Board:
        """Board holding exactly the pieces in *placement*."""
        b = cls()
        for sq, piece in placement.items():
            b[sq] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8, 0, -1):
            cells = []
            for col in range(1, 9):
                p = self[Square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
