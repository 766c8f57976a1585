"""Chess board geometry, piece movement shapes, and FEN/PGN decoding."""

__version__ = "0.1.0"
