"""Board files and squares."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from chessboard_tables.rank import Color, Rank

__all__ = ["InvalidSquareError", "File", "Square", "NUM_FILES", "ALL_FILES", "NUM_SQUARES", "ALL_SQUARES"]


class InvalidSquareError(ValueError):
    """Raised when text does not name a square."""


class File(IntEnum):
    """A file (column) of the chess board, A through H."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, i: int) -> File:
        """Return the file for an index, wrapping around past seven."""
        return cls(i & 7)

    @classmethod
    def from_str(cls, s: str) -> File:
        """Parse a file from the first character of ``s`` ('a' to 'h')."""
        if not s or s[0] not in "abcdefgh":
            raise ValueError(f"invalid file: {s!r}")
        return cls(ord(s[0]) - ord("a"))

    def left(self) -> File:
        """One file left, wrapping from A to H."""
        return File.from_index(self.value - 1)

    def right(self) -> File:
        """One file right, wrapping from H to A."""
        return File.from_index(self.value + 1)

    def to_index(self) -> int:
        """The file as an integer from 0 to 7."""
        return self.value


NUM_FILES = 8
ALL_FILES = tuple(File)


@dataclass(frozen=True, order=True)
class Square:
    """A square of the board, numbered 0 (a1) to 63 (h8)."""

    index: int = 0

    @classmethod
    def make_square(cls, rank: Rank, file: File) -> Square:
        """The square at the given rank and file."""
        return cls((rank.to_index() << 3) ^ file.to_index())

    @classmethod
    def from_str(cls, s: str) -> Square:
        """Parse a square such as ``"e4"`` from the first two characters of ``s``."""
        if len(s) < 2 or s[0] not in "abcdefgh" or s[1] not in "12345678":
            raise InvalidSquareError(f"invalid square: {s!r}")
        return cls.make_square(
            Rank.from_index(ord(s[1]) - ord("1")),
            File.from_index(ord(s[0]) - ord("a")),
        )

    def rank(self) -> Rank:
        """The rank of this square."""
        return Rank.from_index(self.index >> 3)

    def file(self) -> File:
        """The file of this square."""
        return File.from_index(self.index & 7)

    def up(self) -> Square | None:
        """The square above, or None on the eighth rank."""
        if self.rank() is Rank.EIGHTH:
            return None
        return self.uup()

    def down(self) -> Square | None:
        """The square below, or None on the first rank."""
        if self.rank() is Rank.FIRST:
            return None
        return self.udown()

    def left(self) -> Square | None:
        """The square to the left, or None on the A file."""
        if self.file() is File.A:
            return None
        return self.uleft()

    def right(self) -> Square | None:
        """The square to the right, or None on the H file."""
        if self.file() is File.H:
            return None
        return self.uright()

    def forward(self, color: Color) -> Square | None:
        """The square ahead from ``color``'s point of view, or None."""
        return self.up() if color is Color.WHITE else self.down()

    def backward(self, color: Color) -> Square | None:
        """The square behind from ``color``'s point of view, or None."""
        return self.down() if color is Color.WHITE else self.up()

    def uup(self) -> Square:
        """The square above, wrapping to the first rank."""
        return Square.make_square(self.rank().up(), self.file())

    def udown(self) -> Square:
        """The square below, wrapping to the eighth rank."""
        return Square.make_square(self.rank().down(), self.file())

    def uleft(self) -> Square:
        """The square to the left, wrapping to the H file."""
        return Square.make_square(self.rank(), self.file().left())

    def uright(self) -> Square:
        """The square to the right, wrapping to the A file."""
        return Square.make_square(self.rank(), self.file().right())

    def uforward(self, color: Color) -> Square:
        """The square ahead from ``color``'s point of view, wrapping."""
        return self.uup() if color is Color.WHITE else self.udown()

    def ubackward(self, color: Color) -> Square:
        """The square behind from ``color``'s point of view, wrapping."""
        return self.udown() if color is Color.WHITE else self.uup()

    def to_index(self) -> int:
        """The square as an integer for table lookups."""
        return self.index

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return chr(ord("a") + (self.index & 7)) + chr(ord("1") + (self.index >> 3))


NUM_SQUARES = 64
ALL_SQUARES = tuple(Square(i) for i in range(NUM_SQUARES))

for _square in ALL_SQUARES:
    setattr(Square, str(_square).upper(), _square)
del _square