# chessboard_tables

Chess board primitives and the lookup tables a bitboard move generator is
built on. Bitboards are plain Python integers: bit `n` stands for the square
with index `n`, where A1 is 0, B1 is 1 and H8 is 63.

## What is in it

- `chessboard_tables.rank`: `Rank` (the eight ranks, with wrapping `up` and
  `down`, `from_index` and `from_str`), `Color` (white and black; `~color`
  gives the other side, plus `to_my_backrank`, `to_second_rank` and
  `to_seventh_rank`) and `InvalidRankError`.
- `chessboard_tables.piece`: `Piece`, whose `str()` is its lower-case letter
  and whose `symbol(color)` gives `"K"` for a white king and `"n"` for a black
  knight. `PROMOTION_PIECES` lists queen, knight, rook and bishop.
- `chessboard_tables.square`: `File`, `Square` and `InvalidSquareError`.
  Squares move with `up`, `down`, `left`, `right`, `forward` and `backward`
  (which return `None` off the board), or with the `u`-prefixed forms that
  wrap around. Every square is also a class attribute, such as `Square.E4`.
- `chessboard_tables.squares`: `square_bb`, `squares_of`, `bitboard_of` and
  `by_name` convert between squares and bitboards; `EMPTY` and `FULL` are the
  empty and full boards.
- `chessboard_tables.attacks`: `gen_rook_rays`, `gen_bishop_rays`, `get_rays`
  and `gen_knight_moves`.
- `chessboard_tables.steps`: `gen_king_moves`, `kingside_castle_squares`,
  `queenside_castle_squares`, `castle_moves`, `gen_pawn_moves`,
  `gen_pawn_attacks`, `source_double_moves` and `dest_double_moves`.
- `chessboard_tables.lines`: `gen_between` (squares strictly between two
  squares on a line), `gen_lines` (the whole line through two squares),
  `gen_edges`, `gen_ranks`, `gen_files` and `gen_adjacent_files`.
- `chessboard_tables.magic`: `magic_mask`, `rays_to_questions`,
  `questions_and_answers`, `find_magic` (a seeded search returning a `Magic`
  hash), `pext` and `pdep`, and `gen_all_bmis`, which builds a
  `SlidingAttacks` with `rook_moves` and `bishop_moves` for positions where
  pieces block the way.
- `chessboard_tables.zobrist`: fixed Zobrist keys through `piece_key`,
  `castles_key` (castle rights as 0 to 3: none, kingside, queenside, both),
  `en_passant_key` and `side_to_move_key`.
- `chessboard_tables.tables`: `generate_all_tables()` builds every table at
  once and returns a `Tables`; its `magics` property runs the magic search
  for every square and is slow the first time.

Table-building functions cache their results, so calling them again is cheap.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Examples

```python
from chessboard_tables.square import Square, File, InvalidSquareError
from chessboard_tables.rank import Rank, Color
from chessboard_tables.piece import Piece

sq = Square.from_str("d7")
assert sq.rank() == Rank.SEVENTH and sq.file() == File.D
assert str(sq.forward(Color.WHITE)) == "d8"
assert sq.forward(Color.WHITE).forward(Color.WHITE) is None
assert Piece.KING.symbol(Color.WHITE) == "K"

try:
    Square.from_str("z9")
except InvalidSquareError:
    pass
```

Sliding-piece moves with blockers on the board:

```python
from chessboard_tables.magic import gen_all_bmis
from chessboard_tables.squares import by_name, squares_of, bitboard_of

attacks = gen_all_bmis()
blockers = bitboard_of([by_name("a4"), by_name("d1")])
moves = attacks.rook_moves(by_name("a1"), blockers)
print(sorted(str(s) for s in squares_of(moves)))
# ['a2', 'a3', 'a4', 'b1', 'c1', 'd1']
```

Zobrist keys:

```python
from chessboard_tables.zobrist import piece_key, side_to_move_key
from chessboard_tables.piece import Piece
from chessboard_tables.rank import Color
from chessboard_tables.squares import by_name

h = piece_key(Piece.KING, by_name("e1"), Color.WHITE) ^ side_to_move_key()
```

All tables together:

```python
from chessboard_tables.tables import generate_all_tables

tables = generate_all_tables()
print(len(tables.knight_moves))  # 64
```

## What it does not do

This package provides the building blocks only. It has no board or position
type, no FEN parsing, no legal move generation, no game state or result
tracking, and no command-line program.

## Running the tests

```
pytest
```