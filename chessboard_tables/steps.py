"""Step tables for kings and pawns, and the castling and double-push masks."""

from __future__ import annotations

from functools import cache

from chessboard_tables.rank import ALL_COLORS, Color, Rank
from chessboard_tables.square import ALL_FILES, ALL_SQUARES, File, Square
from chessboard_tables.squares import EMPTY, bitboard_of, square_bb

__all__ = [
    "gen_king_moves",
    "kingside_castle_squares",
    "queenside_castle_squares",
    "castle_moves",
    "gen_pawn_moves",
    "gen_pawn_attacks",
    "source_double_moves",
    "dest_double_moves",
]


def _coords(square: Square) -> tuple[int, int]:
    return square.rank().to_index(), square.file().to_index()


def _set(rank: Rank, file: File) -> int:
    return square_bb(Square.make_square(rank, file))


@cache
def gen_king_moves() -> tuple[int, ...]:
    """For each square, the squares a king can step to."""

    def moves(src: Square) -> int:
        src_rank, src_file = _coords(src)
        return bitboard_of(
            dest
            for dest in ALL_SQUARES
            if dest != src
            and abs(src_rank - _coords(dest)[0]) <= 1
            and abs(src_file - _coords(dest)[1]) <= 1
        )

    return tuple(moves(src) for src in ALL_SQUARES)


def kingside_castle_squares(color: Color) -> int:
    """The squares that must be empty for ``color`` to castle kingside."""
    backrank = color.to_my_backrank()
    return _set(backrank, File.F) ^ _set(backrank, File.G)


def queenside_castle_squares(color: Color) -> int:
    """The squares that must be empty for ``color`` to castle queenside."""
    backrank = color.to_my_backrank()
    return _set(backrank, File.B) ^ _set(backrank, File.C) ^ _set(backrank, File.D)


def castle_moves() -> int:
    """The king's start and destination squares of every castling move."""
    return bitboard_of(
        (Square.C1, Square.C8, Square.E1, Square.E8, Square.G1, Square.G8)  # type: ignore[attr-defined]
    )


@cache
def gen_pawn_moves() -> tuple[tuple[int, ...], ...]:
    """Quiet pawn pushes, indexed by colour and then by source square."""

    def moves(color: Color, src: Square) -> int:
        if src.rank() is color.to_second_rank():
            one = src.uforward(color)
            return square_bb(one) ^ square_bb(one.uforward(color))
        ahead = src.forward(color)
        return EMPTY if ahead is None else square_bb(ahead)

    return tuple(tuple(moves(color, src) for src in ALL_SQUARES) for color in ALL_COLORS)


@cache
def gen_pawn_attacks() -> tuple[tuple[int, ...], ...]:
    """Pawn captures, indexed by colour and then by source square."""

    def attacks(color: Color, src: Square) -> int:
        ahead = src.forward(color)
        if ahead is None:
            return EMPTY
        return bitboard_of(sq for sq in (ahead.left(), ahead.right()) if sq is not None)

    return tuple(tuple(attacks(color, src) for src in ALL_SQUARES) for color in ALL_COLORS)


def source_double_moves() -> int:
    """The squares a pawn may push two squares from."""
    return bitboard_of(
        Square.make_square(rank, file) for rank in (Rank.SECOND, Rank.SEVENTH) for file in ALL_FILES
    )


def dest_double_moves() -> int:
    """The squares a two-square pawn push may land on."""
    return bitboard_of(
        Square.make_square(rank, file) for rank in (Rank.FOURTH, Rank.FIFTH) for file in ALL_FILES
    )