"""Rank, file and edge masks, and the lines and segments between squares."""

from __future__ import annotations

from functools import cache

from chessboard_tables.rank import Rank
from chessboard_tables.square import ALL_SQUARES, File, Square
from chessboard_tables.squares import EMPTY, bitboard_of, square_bb

__all__ = ["gen_between", "gen_lines", "gen_edges", "gen_ranks", "gen_files", "gen_adjacent_files"]


def _coords(square: Square) -> tuple[int, int]:
    return square.rank().to_index(), square.file().to_index()


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _direction(src: Square, dest: Square) -> tuple[int, int] | None:
    """The unit step from ``src`` towards ``dest``, or None if they do not line up."""
    if src == dest:
        return None
    (sr, sf), (dr, df) = _coords(src), _coords(dest)
    if sr == dr or sf == df or abs(sr - dr) == abs(sf - df):
        return _sign(dr - sr), _sign(df - sf)
    return None


def _on_board(rank: int, file: int) -> bool:
    return 0 <= rank < 8 and 0 <= file < 8


def _square_at(rank: int, file: int) -> Square:
    return Square.make_square(Rank(rank), File(file))


def _between(src: Square, dest: Square) -> int:
    step = _direction(src, dest)
    if step is None:
        return EMPTY
    rank, file = _coords(src)
    result = EMPTY
    while True:
        rank, file = rank + step[0], file + step[1]
        square = _square_at(rank, file)
        if square == dest:
            return result
        result |= square_bb(square)


def _line(src: Square, dest: Square) -> int:
    step = _direction(src, dest)
    if step is None:
        return EMPTY
    result = square_bb(src)
    for dr, df in (step, (-step[0], -step[1])):
        rank, file = _coords(src)
        while _on_board(rank + dr, file + df):
            rank, file = rank + dr, file + df
            result |= square_bb(_square_at(rank, file))
    return result


@cache
def gen_between() -> tuple[tuple[int, ...], ...]:
    """For each pair of squares, the squares strictly between them on a line, or empty."""
    return tuple(tuple(_between(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES)


@cache
def gen_lines() -> tuple[tuple[int, ...], ...]:
    """For each pair of squares, the whole line through both, or empty if none."""
    return tuple(tuple(_line(src, dest) for dest in ALL_SQUARES) for src in ALL_SQUARES)


@cache
def gen_edges() -> int:
    """The squares on the outer edge of the board."""
    return bitboard_of(
        sq
        for sq in ALL_SQUARES
        if sq.rank() in (Rank.FIRST, Rank.EIGHTH) or sq.file() in (File.A, File.H)
    )


@cache
def gen_ranks() -> tuple[int, ...]:
    """For each rank, the squares on it."""
    return tuple(bitboard_of(sq for sq in ALL_SQUARES if sq.rank() is rank) for rank in Rank)


@cache
def gen_files() -> tuple[int, ...]:
    """For each file, the squares on it."""
    return tuple(bitboard_of(sq for sq in ALL_SQUARES if sq.file() is file) for file in File)


@cache
def gen_adjacent_files() -> tuple[int, ...]:
    """For each file, the squares on the files beside it."""
    return tuple(
        bitboard_of(sq for sq in ALL_SQUARES if abs(sq.file().to_index() - file.to_index()) == 1)
        for file in File
    )