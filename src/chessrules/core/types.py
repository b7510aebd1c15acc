"""Square value and coordinate helpers.

Board layout (row, column), both 1-based:
    a1=(1, 1), b1=(1, 2), ..., h1=(1, 8)
    ...
    a8=(8, 1), b8=(8, 2), ..., h8=(8, 8)

Row 1 is WHITE's back rank.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (1 <= self.row <= 8 and 1 <= self.col <= 8):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @property
    def index(self) -> int:
        """Flat index 0–63 (a1=0, h8=63)."""
        return (self.row - 1) * 8 + (self.col - 1)

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index // 8 + 1, index % 8 + 1)

    @property
    def name(self) -> str:
        """Human-readable name, e.g. (4, 5) → 'e4'."""
        return f"{_FILES[self.col - 1]}{self.row}"

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Square shifted by (*drow*, *dcol*), or ``None`` if off-board."""
        row = self.row + drow
        col = self.col + dcol
        if 1 <= row <= 8 and 1 <= col <= 8:
            return Square(row, col)
        return None

    def __str__(self) -> str:
        return self.name


def square_name(sq: Square) -> str:
    return sq.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 5)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(int(name[1]), _FILES.index(name[0]) + 1)


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
