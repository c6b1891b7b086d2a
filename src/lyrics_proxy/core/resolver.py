"""Resolve lyrics by walking an ordered chain of providers."""

from typing import Optional, Sequence

import requests  # type: ignore[import-untyped]

from ..config import LYRICS_NOT_FOUND
from ..utils.logging import get_logger
from ..utils.validation import validate_lyrics_request
from .models import LyricsResult
from .providers import LyricsOvhProvider, LyricsProvider, SearchProxyProvider

logger = get_logger(__name__)

PLACEHOLDER_SOURCE = "placeholder"


def default_providers(
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> list[LyricsProvider]:
    """The structured API first, then the search scrape."""
    return [
        LyricsOvhProvider(timeout=timeout, session=session),
        SearchProxyProvider(timeout=timeout, session=session),
    ]


class LyricsResolver:
    """Return the first usable lyrics from ``providers``, in order.

    Providers are tried one at a time; the first non-empty answer wins and
    the rest are never called. When none answers, the result carries the
    not-found placeholder instead of raising. Input validation happens before
    any provider is touched and raises ``ValidationError``. Any other
    exception from a provider propagates unchanged.
    """

    def __init__(
        self,
        providers: Optional[Sequence[LyricsProvider]] = None,
        placeholder: str = LYRICS_NOT_FOUND,
    ):
        self.providers = list(providers) if providers is not None else default_providers()
        self.placeholder = placeholder

    def resolve(self, artist: Optional[str], title: Optional[str]) -> LyricsResult:
        request = validate_lyrics_request(artist, title)

        for provider in self.providers:
            lyrics = provider.attempt(request.artist, request.title)
            if lyrics:
                logger.info(
                    f"Lyrics for {request.artist} - {request.title} from {provider.name}"
                )
                return LyricsResult(
                    artist=request.artist,
                    title=request.title,
                    lyrics=lyrics,
                    source=provider.name,
                )
            logger.debug(f"{provider.name} had nothing, trying next provider")

        logger.info(f"No lyrics found for {request.artist} - {request.title}")
        return LyricsResult(
            artist=request.artist,
            title=request.title,
            lyrics=self.placeholder,
            source=PLACEHOLDER_SOURCE,
        )
