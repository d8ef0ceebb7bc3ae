"""Board ranks and the two sides of play."""

from __future__ import annotations

from enum import Enum, IntEnum

__all__ = ["InvalidRankError", "Rank", "Color", "NUM_RANKS", "ALL_RANKS", "NUM_COLORS", "ALL_COLORS"]


class InvalidRankError(ValueError):
    """Raised when text does not name a rank."""


class Rank(IntEnum):
    """A rank (row) of the chess board, first through eighth."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    EIGHTH = 7

    @classmethod
    def from_index(cls, i: int) -> Rank:
        """Return the rank for an index, wrapping around past seven."""
        return cls(i & 7)

    @classmethod
    def from_str(cls, s: str) -> Rank:
        """Parse a rank from the first character of ``s`` ('1' to '8')."""
        if not s or s[0] not in "12345678":
            raise InvalidRankError(f"invalid rank: {s!r}")
        return cls(ord(s[0]) - ord("1"))

    def up(self) -> Rank:
        """One rank up, wrapping from the eighth to the first."""
        return Rank.from_index(self.value + 1)

    def down(self) -> Rank:
        """One rank down, wrapping from the first to the eighth."""
        return Rank.from_index(self.value - 1)

    def to_index(self) -> int:
        """The rank as an integer from 0 to 7."""
        return self.value


NUM_RANKS = 8
ALL_RANKS = tuple(Rank)


class Color(Enum):
    """The side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    def to_index(self) -> int:
        """The colour as an integer for table lookups."""
        return self.value

    def __invert__(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def to_my_backrank(self) -> Rank:
        """The rank this side's pieces start on."""
        return Rank.FIRST if self is Color.WHITE else Rank.EIGHTH

    def to_second_rank(self) -> Rank:
        """The rank this side's pawns start on."""
        return Rank.SECOND if self is Color.WHITE else Rank.SEVENTH

    def to_seventh_rank(self) -> Rank:
        """The rank from which this side's pawns promote."""
        return Rank.SEVENTH if self is Color.WHITE else Rank.SECOND


NUM_COLORS = 2
ALL_COLORS = (Color.WHITE, Color.BLACK)