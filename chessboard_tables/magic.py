"""Sliding-piece attack tables: blocker masks, magic hashing and bit-extraction lookup."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache

from chessboard_tables.attacks import get_rays
from chessboard_tables.piece import Piece
from chessboard_tables.rank import Rank
from chessboard_tables.square import ALL_SQUARES, File, Square
from chessboard_tables.squares import EMPTY, FULL, bitboard_of, square_bb
from chessboard_tables.lines import gen_edges

__all__ = [
    "ROOK_BITS",
    "BISHOP_BITS",
    "NUM_MOVES",
    "DEFAULT_SEED",
    "Magic",
    "BmiMagic",
    "SlidingAttacks",
    "random_bitboard",
    "magic_mask",
    "rays_to_questions",
    "questions_and_answers",
    "find_magic",
    "pext",
    "pdep",
    "gen_all_bmis",
]

# How many squares a blocking piece can be on, at most, for a rook and a bishop.
ROOK_BITS = 12
BISHOP_BITS = 9
# An upper bound on the size of the combined move table for both sliders.
NUM_MOVES = 64 * (1 << ROOK_BITS) + 64 * (1 << BISHOP_BITS)

DEFAULT_SEED = 0xDEADBEEF12345678

_Step = Callable[[Square], "Square | None"]


def _diagonal(first: _Step, second: _Step) -> _Step:
    def step(square: Square) -> Square | None:
        moved = first(square)
        return None if moved is None else second(moved)

    return step


_ROOK_STEPS: tuple[_Step, ...] = (Square.left, Square.right, Square.up, Square.down)
_BISHOP_STEPS: tuple[_Step, ...] = (
    _diagonal(Square.left, Square.up),
    _diagonal(Square.right, Square.up),
    _diagonal(Square.left, Square.down),
    _diagonal(Square.right, Square.down),
)


def _check_slider(piece: Piece) -> None:
    if piece not in (Piece.ROOK, Piece.BISHOP):
        raise ValueError(f"not a rook or bishop: {piece!r}")


@cache
def _direction_rays(square: Square, piece: Piece) -> tuple[tuple[int, ...], ...]:
    """For each direction the piece moves in, the square bitboards walked from ``square``."""
    steps = _ROOK_STEPS if piece is Piece.ROOK else _BISHOP_STEPS
    result = []
    for step in steps:
        ray = []
        current = step(square)
        while current is not None:
            ray.append(square_bb(current))
            current = step(current)
        result.append(tuple(ray))
    return tuple(result)


def _answer(direction_rays: tuple[tuple[int, ...], ...], blockers: int) -> int:
    result = EMPTY
    for ray in direction_rays:
        for bb in ray:
            result ^= bb
            if bb & blockers:
                break
    return result


def random_bitboard(rng: random.Random) -> int:
    """A random 64-bit bitboard with few bits set."""
    return rng.getrandbits(64) & rng.getrandbits(64) & rng.getrandbits(64)


def magic_mask(square: Square, piece: Piece) -> int:
    """The slider's empty-board rays from ``square`` without the squares at the end of each ray."""
    _check_slider(piece)
    rays = get_rays(square, piece)
    if piece is Piece.BISHOP:
        return rays & ~gen_edges() & FULL
    ends = bitboard_of(
        edge
        for edge in ALL_SQUARES
        if (square.rank() is edge.rank() and edge.file() in (File.A, File.H))
        or (square.file() is edge.file() and edge.rank() in (Rank.FIRST, Rank.EIGHTH))
    )
    return rays & ~ends & FULL


def rays_to_questions(mask: int) -> list[int]:
    """Every subset of ``mask``; the i-th holds the mask squares whose bit is set in i."""
    if not 0 <= mask <= FULL:
        raise ValueError(f"bitboard out of range: {mask}")
    # Counting through the subsets in increasing order gives exactly that numbering.
    result = [EMPTY]
    subset = (EMPTY - mask) & mask
    while subset:
        result.append(subset)
        subset = (subset - mask) & mask
    return result


def questions_and_answers(square: Square, piece: Piece) -> tuple[list[int], list[int]]:
    """Every set of blockers for the slider on ``square`` and the moves each one allows."""
    mask = magic_mask(square, piece)
    questions = rays_to_questions(mask)
    rays = _direction_rays(square, piece)
    return questions, [_answer(rays, question) for question in questions]


@dataclass(frozen=True)
class Magic:
    """A perfect hash from blocker sets to moves for one slider on one square."""

    magic_number: int
    mask: int
    rightshift: int
    moves: tuple[int, ...]

    def index(self, blockers: int) -> int:
        """The table slot for a set of blockers."""
        return (((blockers & self.mask) * self.magic_number) & FULL) >> self.rightshift

    def moves_for(self, blockers: int) -> int:
        """The moves allowed by a set of blockers."""
        return self.moves[self.index(blockers)]


def find_magic(square: Square, piece: Piece, seed: int = DEFAULT_SEED) -> Magic:
    """Search for a magic number that hashes every blocker set of the slider without collision."""
    questions, answers = questions_and_answers(square, piece)
    mask = magic_mask(square, piece)
    rightshift = 65 - len(questions).bit_length()
    rng = random.Random(seed)

    while True:
        candidate = random_bitboard(rng)
        if ((mask * candidate) & FULL).bit_count() < 6:
            continue
        table = [EMPTY] * len(questions)
        for question, answer in zip(questions, answers):
            slot = ((candidate * question) & FULL) >> rightshift
            if table[slot] in (EMPTY, answer):
                table[slot] = answer
            else:
                break
        else:
            return Magic(candidate, mask, rightshift, tuple(table))


def pext(value: int, mask: int) -> int:
    """Gather the bits of ``value`` under ``mask`` into the low bits, lowest first."""
    result = 0
    bit = 1
    while mask:
        lowest = mask & -mask
        if value & lowest:
            result |= bit
        bit <<= 1
        mask ^= lowest
    return result


def pdep(value: int, mask: int) -> int:
    """Scatter the low bits of ``value`` onto the set bits of ``mask``, lowest first."""
    result = 0
    bit = 1
    while mask:
        lowest = mask & -mask
        if value & bit:
            result |= lowest
        bit <<= 1
        mask ^= lowest
    return result


@dataclass(frozen=True)
class BmiMagic:
    """Where one slider's compressed moves live and which blockers select them."""

    blockers_mask: int
    offset: int


@dataclass(frozen=True)
class SlidingAttacks:
    """Rook and bishop move lookup by bit extraction over a shared table."""

    rook: tuple[BmiMagic, ...]
    bishop: tuple[BmiMagic, ...]
    moves: tuple[int, ...]

    def _lookup(self, entry: BmiMagic, square: Square, piece: Piece, blockers: int) -> int:
        compressed = self.moves[entry.offset + pext(blockers, entry.blockers_mask)]
        return pdep(compressed, get_rays(square, piece))

    def rook_moves(self, square: Square, blockers: int) -> int:
        """The squares a rook on ``square`` reaches given the occupied squares ``blockers``."""
        return self._lookup(self.rook[square.to_index()], square, Piece.ROOK, blockers)

    def bishop_moves(self, square: Square, blockers: int) -> int:
        """The squares a bishop on ``square`` reaches given the occupied squares ``blockers``."""
        return self._lookup(self.bishop[square.to_index()], square, Piece.BISHOP, blockers)


@cache
def gen_all_bmis() -> SlidingAttacks:
    """Build the extraction tables for every square, rook before bishop on each square."""
    rook: list[BmiMagic] = []
    bishop: list[BmiMagic] = []
    moves: list[int] = []
    for square in ALL_SQUARES:
        for piece, entries in ((Piece.ROOK, rook), (Piece.BISHOP, bishop)):
            _, answers = questions_and_answers(square, piece)
            rays = get_rays(square, piece)
            entries.append(BmiMagic(magic_mask(square, piece), len(moves)))
            # The i-th question extracts to i under the mask, so answers are already in slot order.
            moves.extend(pext(answer, rays) for answer in answers)
    return SlidingAttacks(tuple(rook), tuple(bishop), tuple(moves))