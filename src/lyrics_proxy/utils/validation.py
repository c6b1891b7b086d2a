"""Validation utilities."""

from typing import Optional

from ..core.models import LyricsRequest
from ..exceptions import ValidationError
from .logging import get_logger

logger = get_logger(__name__)

MISSING_ARTIST_OR_TITLE = "Missing artist or title"


def validate_lyrics_request(
    artist: Optional[str], title: Optional[str]
) -> LyricsRequest:
    """Validate lookup parameters.

    Values are passed through untouched; only a missing or empty value is
    rejected.
    """
    if not artist or not title:
        logger.debug(f"Rejected lyrics request: artist={artist!r} title={title!r}")
        raise ValidationError(MISSING_ARTIST_OR_TITLE)
    return LyricsRequest(artist=artist, title=title)
