"""Conversions between squares and 64-bit bitboards."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessboard_tables.square import InvalidSquareError, Square

__all__ = ["EMPTY", "FULL", "square_bb", "squares_of", "bitboard_of", "by_name"]

EMPTY = 0
FULL = (1 << 64) - 1


def square_bb(square: Square) -> int:
    """The bitboard holding only ``square``."""
    return 1 << square.to_index()


def squares_of(bb: int) -> Iterator[Square]:
    """Yield the squares set in ``bb``, lowest index first."""
    if not 0 <= bb <= FULL:
        raise ValueError(f"bitboard out of range: {bb}")
    while bb:
        lowest = bb & -bb
        yield Square(lowest.bit_length() - 1)
        bb ^= lowest


def bitboard_of(squares: Iterable[Square]) -> int:
    """The bitboard with every square in ``squares`` set."""
    bb = EMPTY
    for square in squares:
        bb |= square_bb(square)
    return bb


def by_name(name: str) -> Square:
    """The square named exactly by ``name``, such as ``"e4"`` or ``"E4"``."""
    if len(name) != 2:
        raise InvalidSquareError(f"invalid square: {name!r}")
    return Square.from_str(name.lower())