"""Every move-generation lookup table, built together."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache, cached_property

from chessboard_tables.attacks import gen_bishop_rays, gen_knight_moves, gen_rook_rays
from chessboard_tables.lines import (
    gen_adjacent_files,
    gen_between,
    gen_edges,
    gen_files,
    gen_lines,
    gen_ranks,
)
from chessboard_tables.magic import Magic, SlidingAttacks, find_magic, gen_all_bmis
from chessboard_tables.piece import Piece
from chessboard_tables.rank import ALL_COLORS
from chessboard_tables.square import ALL_SQUARES
from chessboard_tables.steps import (
    castle_moves,
    dest_double_moves,
    gen_king_moves,
    gen_pawn_attacks,
    gen_pawn_moves,
    kingside_castle_squares,
    queenside_castle_squares,
    source_double_moves,
)

__all__ = ["Tables", "generate_all_tables"]


@dataclass(frozen=True)
class Tables:
    """The full set of lookup tables; per-square tables are indexed by square index."""

    king_moves: tuple[int, ...]
    kingside_castle_squares: tuple[int, ...]
    queenside_castle_squares: tuple[int, ...]
    castle_moves: int
    knight_moves: tuple[int, ...]
    rook_rays: tuple[int, ...]
    bishop_rays: tuple[int, ...]
    between: tuple[tuple[int, ...], ...]
    lines: tuple[tuple[int, ...], ...]
    pawn_attacks: tuple[tuple[int, ...], ...]
    pawn_moves: tuple[tuple[int, ...], ...]
    pawn_source_double_moves: int
    pawn_dest_double_moves: int
    sliders: SlidingAttacks
    files: tuple[int, ...]
    adjacent_files: tuple[int, ...]
    ranks: tuple[int, ...]
    edges: int

    @cached_property
    def magics(self) -> dict[Piece, tuple[Magic, ...]]:
        """Magic hashes for bishops and rooks on every square; slow to compute."""
        return {
            piece: tuple(find_magic(square, piece) for square in ALL_SQUARES)
            for piece in (Piece.BISHOP, Piece.ROOK)
        }


@cache
def generate_all_tables() -> Tables:
    """Build every table once and return them together."""
    return Tables(
        king_moves=gen_king_moves(),
        kingside_castle_squares=tuple(kingside_castle_squares(c) for c in ALL_COLORS),
        queenside_castle_squares=tuple(queenside_castle_squares(c) for c in ALL_COLORS),
        castle_moves=castle_moves(),
        knight_moves=gen_knight_moves(),
        rook_rays=gen_rook_rays(),
        bishop_rays=gen_bishop_rays(),
        between=gen_between(),
        lines=gen_lines(),
        pawn_attacks=gen_pawn_attacks(),
        pawn_moves=gen_pawn_moves(),
        pawn_source_double_moves=source_double_moves(),
        pawn_dest_double_moves=dest_double_moves(),
        sliders=gen_all_bmis(),
        files=gen_files(),
        adjacent_files=gen_adjacent_files(),
        ranks=gen_ranks(),
        edges=gen_edges(),
    )