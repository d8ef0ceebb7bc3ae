import pytest

from chessboard_tables.attacks import gen_knight_moves
from chessboard_tables.piece import Piece
from chessboard_tables.rank import Color
from chessboard_tables.square import ALL_SQUARES
from chessboard_tables.squares import bitboard_of, by_name, square_bb
from chessboard_tables.steps import kingside_castle_squares
from chessboard_tables.tables import Tables, generate_all_tables


@pytest.fixture(scope="module")
def tables() -> Tables:
    return generate_all_tables()


def test_tables_are_built_once(tables):
    assert generate_all_tables() is tables


def test_per_square_tables_have_sixty_four_entries(tables):
    for table in (tables.king_moves, tables.knight_moves, tables.rook_rays, tables.bishop_rays):
        assert len(table) == 64
    assert len(tables.between) == 64
    assert all(len(row) == 64 for row in tables.lines)
    assert all(len(row) == 64 for row in tables.pawn_moves)


def test_knight_table_matches_generator(tables):
    assert tables.knight_moves == gen_knight_moves()


def test_castle_squares_per_colour(tables):
    assert tables.kingside_castle_squares[0] == kingside_castle_squares(Color.WHITE)
    assert tables.kingside_castle_squares[1] == bitboard_of([by_name("f8"), by_name("g8")])
    assert tables.queenside_castle_squares[0] == bitboard_of(
        by_name(n) for n in ("b1", "c1", "d1")
    )


def test_sliders_agree_with_rays(tables):
    for square in ALL_SQUARES:
        i = square.to_index()
        assert tables.sliders.rook_moves(square, 0) == tables.rook_rays[i]
        assert tables.sliders.bishop_moves(square, 0) == tables.bishop_rays[i]


def test_between_lies_on_line(tables):
    for src in ALL_SQUARES:
        for dest in ALL_SQUARES:
            segment = tables.between[src.to_index()][dest.to_index()]
            line = tables.lines[src.to_index()][dest.to_index()]
            assert segment & ~line == 0
            assert segment & (square_bb(src) | square_bb(dest)) == 0


def test_ranks_and_files_partition_board(tables):
    ranks = 0
    files = 0
    for rank_bb, file_bb in zip(tables.ranks, tables.files):
        assert rank_bb.bit_count() == 8
        assert file_bb.bit_count() == 8
        ranks |= rank_bb
        files |= file_bb
    assert ranks == files == (1 << 64) - 1
    assert tables.edges & ~(tables.ranks[0] | tables.ranks[7] | tables.files[0] | tables.files[7]) == 0


def test_rook_blocked_on_the_diagonal_of_the_queen(tables):
    blockers = bitboard_of([by_name("d6")])
    moves = tables.sliders.rook_moves(by_name("d4"), blockers)
    assert moves & square_bb(by_name("d6"))
    assert moves & square_bb(by_name("d7")) == 0
    assert moves & tables.rook_rays[by_name("d4").to_index()] == moves


def test_pawn_double_move_masks(tables):
    assert tables.pawn_source_double_moves == tables.ranks[1] | tables.ranks[6]
    assert tables.pawn_dest_double_moves == tables.ranks[3] | tables.ranks[4]


def test_bishop_rays_are_lines_from_square(tables):
    d4 = by_name("d4")
    for dest in ALL_SQUARES:
        if tables.bishop_rays[d4.to_index()] & square_bb(dest):
            assert tables.lines[d4.to_index()][dest.to_index()] & square_bb(d4)
    assert Piece.BISHOP.to_index() == 2