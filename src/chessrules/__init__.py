"""Chess move legality, move application and FEN codec."""

__version__ = "0.1.0"
