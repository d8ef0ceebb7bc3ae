"""Chess board primitives, bitboard lookup tables and Zobrist keys."""

__version__ = "0.1.0"