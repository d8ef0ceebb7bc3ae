"""Empty-board rays for sliders and knight move tables."""

from __future__ import annotations

from functools import cache

from chessboard_tables.piece import Piece
from chessboard_tables.square import ALL_SQUARES, Square
from chessboard_tables.squares import bitboard_of

__all__ = ["gen_rook_rays", "gen_bishop_rays", "get_rays", "gen_knight_moves"]


def _coords(square: Square) -> tuple[int, int]:
    return square.rank().to_index(), square.file().to_index()


@cache
def gen_rook_rays() -> tuple[int, ...]:
    """For each square, the squares a rook attacks on an empty board."""

    def rays(src: Square) -> int:
        src_rank, src_file = _coords(src)
        return bitboard_of(
            dest
            for dest in ALL_SQUARES
            if dest != src
            and (_coords(dest)[0] == src_rank or _coords(dest)[1] == src_file)
        )

    return tuple(rays(src) for src in ALL_SQUARES)


@cache
def gen_bishop_rays() -> tuple[int, ...]:
    """For each square, the squares a bishop attacks on an empty board."""

    def rays(src: Square) -> int:
        src_rank, src_file = _coords(src)
        return bitboard_of(
            dest
            for dest in ALL_SQUARES
            if dest != src
            and abs(src_rank - _coords(dest)[0]) == abs(src_file - _coords(dest)[1])
        )

    return tuple(rays(src) for src in ALL_SQUARES)


def get_rays(square: Square, piece: Piece) -> int:
    """Empty-board rays from ``square``: rook rays for a rook, bishop rays otherwise."""
    table = gen_rook_rays() if piece is Piece.ROOK else gen_bishop_rays()
    return table[square.to_index()]


@cache
def gen_knight_moves() -> tuple[int, ...]:
    """For each square, the squares a knight can jump to."""

    def moves(src: Square) -> int:
        src_rank, src_file = _coords(src)
        result = []
        for dest in ALL_SQUARES:
            dest_rank, dest_file = _coords(dest)
            steps = {abs(src_rank - dest_rank), abs(src_file - dest_file)}
            if steps == {1, 2}:
                result.append(dest)
        return bitboard_of(result)

    return tuple(moves(src) for src in ALL_SQUARES)