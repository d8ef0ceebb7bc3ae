import random

import pytest

from chessboard_tables.attacks import get_rays
from chessboard_tables.lines import gen_edges
from chessboard_tables.magic import (
    BISHOP_BITS,
    ROOK_BITS,
    find_magic,
    gen_all_bmis,
    magic_mask,
    pdep,
    pext,
    questions_and_answers,
    random_bitboard,
    rays_to_questions,
)
from chessboard_tables.piece import Piece
from chessboard_tables.square import ALL_SQUARES
from chessboard_tables.squares import FULL, bitboard_of, by_name
from chessboard_tables.steps import gen_king_moves


def test_random_bitboard_is_deterministic_and_in_range():
    first = random_bitboard(random.Random(7))
    second = random_bitboard(random.Random(7))
    assert first == second
    assert 0 <= first <= FULL


def test_mask_sizes_match_blocker_bits():
    assert magic_mask(by_name("a1"), Piece.ROOK).bit_count() == ROOK_BITS
    assert magic_mask(by_name("d4"), Piece.BISHOP).bit_count() == BISHOP_BITS


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_masks_lie_within_rays(piece):
    for square in ALL_SQUARES:
        mask = magic_mask(square, piece)
        assert mask & ~get_rays(square, piece) == 0


def test_bishop_masks_avoid_edges():
    assert all(magic_mask(sq, Piece.BISHOP) & gen_edges() == 0 for sq in ALL_SQUARES)


def test_magic_mask_rejects_non_sliders():
    with pytest.raises(ValueError):
        magic_mask(by_name("a1"), Piece.QUEEN)


def test_rays_to_questions_enumerates_subsets_in_order():
    mask = magic_mask(by_name("e4"), Piece.BISHOP)
    questions = rays_to_questions(mask)
    assert len(questions) == 2 ** mask.bit_count()
    assert questions[0] == 0
    assert len(set(questions)) == len(questions)
    combined = 0
    for i, question in enumerate(questions):
        assert question & ~mask == 0
        assert pext(question, mask) == i
        combined |= question
    assert combined == mask


def test_rays_to_questions_rejects_out_of_range():
    with pytest.raises(ValueError):
        rays_to_questions(FULL + 1)


@pytest.mark.parametrize("name", ["a1", "d4", "h8", "c7"])
@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_answers_cover_rays(name, piece):
    square = by_name(name)
    questions, answers = questions_and_answers(square, piece)
    assert len(questions) == len(answers)
    rays = get_rays(square, piece)
    combined = 0
    for answer in answers:
        assert answer & ~rays == 0
        combined |= answer
    assert combined == rays


def test_empty_blockers_give_full_rays():
    square = by_name("d4")
    questions, answers = questions_and_answers(square, Piece.ROOK)
    assert questions[0] == 0
    assert answers[0] == get_rays(square, Piece.ROOK)


def test_pext_pins_value():
    assert pext(0b10110, 0b11100) == 0b101


@pytest.mark.parametrize("value", [0, 1, 0xFFFF, 0x8000000000000001, 0x123456789ABCDEF0])
@pytest.mark.parametrize("mask", [0, 0xFF00, 0x8100000000000081, FULL])
def test_pdep_undoes_pext(value, mask):
    assert pdep(pext(value, mask), mask) == value & mask
    assert pext(pdep(value, mask), mask) == value & ((1 << mask.bit_count()) - 1)


@pytest.mark.parametrize("name", ["a1", "d4", "g7", "h1"])
def test_bishop_magic_hashes_every_blocker_set(name):
    square = by_name(name)
    magic = find_magic(square, Piece.BISHOP)
    questions, answers = questions_and_answers(square, Piece.BISHOP)
    assert magic.rightshift == 64 - magic.mask.bit_count()
    assert len(magic.moves) == len(questions)
    for question, answer in zip(questions, answers):
        assert magic.moves_for(question) == answer


def test_rook_magic_hashes_every_blocker_set():
    square = by_name("d4")
    magic = find_magic(square, Piece.ROOK)
    questions, answers = questions_and_answers(square, Piece.ROOK)
    for question, answer in zip(questions, answers):
        assert magic.moves_for(question) == answer


def test_find_magic_is_deterministic_for_a_seed():
    square = by_name("c3")
    first = find_magic(square, Piece.BISHOP, 42)
    second = find_magic(square, Piece.BISHOP, 42)
    assert first == second
    assert first.moves == second.moves
    questions, answers = questions_and_answers(square, Piece.BISHOP)
    for question, answer in zip(questions, answers):
        assert first.moves_for(question) == answer
        assert second.moves_for(question) == answer


def test_sliding_attacks_on_empty_board_are_rays():
    sliders = gen_all_bmis()
    for square in ALL_SQUARES:
        assert sliders.rook_moves(square, 0) == get_rays(square, Piece.ROOK)
        assert sliders.bishop_moves(square, 0) == get_rays(square, Piece.BISHOP)


def test_sliding_attacks_on_full_board_reach_neighbours_only():
    sliders = gen_all_bmis()
    kings = gen_king_moves()
    for square in ALL_SQUARES:
        neighbours = kings[square.to_index()]
        assert sliders.rook_moves(square, FULL) == neighbours & get_rays(square, Piece.ROOK)
        assert sliders.bishop_moves(square, FULL) == neighbours & get_rays(square, Piece.BISHOP)


@pytest.mark.parametrize("piece", [Piece.ROOK, Piece.BISHOP])
def test_sliding_attacks_agree_with_answers(piece):
    sliders = gen_all_bmis()
    lookup = sliders.rook_moves if piece is Piece.ROOK else sliders.bishop_moves
    for name in ("a1", "e5", "h3"):
        square = by_name(name)
        questions, answers = questions_and_answers(square, piece)
        for question, answer in zip(questions, answers):
            assert lookup(square, question) == answer


def test_rook_blocked_example():
    sliders = gen_all_bmis()
    blockers = bitboard_of([by_name("a4"), by_name("d1")])
    expected = bitboard_of(by_name(n) for n in ("a2", "a3", "a4", "b1", "c1", "d1"))
    assert sliders.rook_moves(by_name("a1"), blockers) == expected


def test_bmi_offsets_are_contiguous():
    sliders = gen_all_bmis()
    assert sliders.rook[0].offset == 0
    assert sliders.bishop[0].offset == 2 ** sliders.rook[0].blockers_mask.bit_count()
    last = sliders.bishop[-1]
    assert len(sliders.moves) == last.offset + 2 ** last.blockers_mask.bit_count()
    assert gen_all_bmis() is sliders