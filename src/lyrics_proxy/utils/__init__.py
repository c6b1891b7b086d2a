"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import validate_lyrics_request, MISSING_ARTIST_OR_TITLE

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_lyrics_request",
    "MISSING_ARTIST_OR_TITLE",
]
