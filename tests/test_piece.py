from chessboard_tables.piece import ALL_PIECES, NUM_PIECES, PROMOTION_PIECES, Piece
from chessboard_tables.rank import Color


def test_symbol_documented_examples():
    assert Piece.KING.symbol(Color.WHITE) == "K"
    assert Piece.KNIGHT.symbol(Color.BLACK) == "n"


def test_letters():
    assert "".join(Piece.symbol(p, Color.BLACK) for p in ALL_PIECES) == "pnbrqk"
    assert "".join(Piece.symbol(p, Color.WHITE) for p in ALL_PIECES) == "PNBRQK"
    assert str(Piece.KNIGHT) == "n"
    assert str(Piece.QUEEN) == "q"


def test_white_symbol_is_upper_of_black():
    for piece in ALL_PIECES:
        black = Piece.symbol(piece, Color.BLACK)
        assert Piece.symbol(piece, Color.WHITE) == black.upper()
        assert Piece.__str__(piece) == black


def test_indices_follow_order():
    assert [Piece.to_index(p) for p in ALL_PIECES] == list(range(NUM_PIECES))
    assert list(ALL_PIECES) == sorted(ALL_PIECES)


def test_promotion_pieces():
    assert [Piece.to_index(p) for p in PROMOTION_PIECES] == [4, 1, 3, 2]
    assert "".join(Piece.symbol(p, Color.WHITE) for p in PROMOTION_PIECES) == "QNRB"