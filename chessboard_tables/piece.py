"""Chess piece types."""

from __future__ import annotations

from enum import IntEnum

from chessboard_tables.rank import Color

__all__ = ["Piece", "NUM_PIECES", "ALL_PIECES", "NUM_PROMOTION_PIECES", "PROMOTION_PIECES"]

_LETTERS = "pnbrqk"


class Piece(IntEnum):
    """A piece type, in order of ascending value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def to_index(self) -> int:
        """The piece as an integer for table lookups."""
        return self.value

    def symbol(self, color: Color) -> str:
        """The piece letter: upper case for white, lower case for black."""
        letter = str(self)
        return letter.upper() if color is Color.WHITE else letter

    def __str__(self) -> str:
        return _LETTERS[self.value]


NUM_PIECES = 6
ALL_PIECES = tuple(Piece)

NUM_PROMOTION_PIECES = 4
PROMOTION_PIECES = (Piece.QUEEN, Piece.KNIGHT, Piece.ROOK, Piece.BISHOP)