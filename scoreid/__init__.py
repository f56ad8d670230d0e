"""Piece and score identity resolution for a music-practice logbook."""

__version__ = "0.1.0"
