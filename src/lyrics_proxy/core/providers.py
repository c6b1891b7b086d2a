"""Lyrics providers consulted in order by the resolver.

Every provider exposes one capability, ``attempt(artist, title)``, returning
lyrics text or ``None``. Routine failures (network errors, bad statuses,
unusable bodies) are absorbed here and reported as ``None``; anything else
propagates to the caller.
"""

from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import quote

import requests  # type: ignore[import-untyped]

from .. import config
from ..exceptions import ProviderUnavailable
from ..utils.logging import get_logger
from . import fetch
from .html_text import extract_lyrics, is_acceptable

logger = get_logger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone besides [A-Za-z0-9]
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode ``value`` for use inside a single URL component."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class LyricsProvider(ABC):
    """A single source of lyrics."""

    name = "provider"

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.session = session

    @abstractmethod
    def attempt(self, artist: str, title: str) -> Optional[str]:
        """Return lyrics text, or None when this provider has nothing usable."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout})"


class LyricsOvhProvider(LyricsProvider):
    """Structured lookup against the lyrics.ovh JSON API."""

    name = "lyrics.ovh"

    def __init__(self, *, base_url: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.base_url = (base_url or config.LYRICS_OVH_BASE_URL).rstrip("/")

    def build_url(self, artist: str, title: str) -> str:
        return (
            f"{self.base_url}/{encode_uri_component(artist)}"
            f"/{encode_uri_component(title)}"
        )

    def attempt(self, artist: str, title: str) -> Optional[str]:
        url = self.build_url(artist, title)
        try:
            data = fetch.fetch_json(url, timeout=self.timeout, session=self.session)
        except ProviderUnavailable as e:
            logger.debug(f"{self.name} unavailable: {e}")
            return None

        lyrics = data.get("lyrics") if isinstance(data, dict) else None
        if not lyrics or not isinstance(lyrics, str):
            logger.debug(f"{self.name} returned no lyrics for {artist} - {title}")
            return None
        return lyrics


class SearchProxyProvider(LyricsProvider):
    """Scrape a text-only rendering of a web search for the song's lyrics."""

    name = "search-proxy"

    def __init__(
        self,
        *,
        proxy_url: Optional[str] = None,
        search_url: Optional[str] = None,
        min_length: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.proxy_url = proxy_url or config.SEARCH_PROXY_URL
        self.search_url = search_url or config.SEARCH_ENGINE_URL
        self.min_length = config.MIN_SCRAPED_LENGTH if min_length is None else min_length

    def build_url(self, artist: str, title: str) -> str:
        # The query already ends in "lyrics" and the template appends "+lyrics"
        # again; the proxy is queried with the word twice.
        query = encode_uri_component(f"{artist} {title} lyrics")
        return f"{self.proxy_url}?strURL={self.search_url}?q={query}+lyrics"

    def attempt(self, artist: str, title: str) -> Optional[str]:
        url = self.build_url(artist, title)
        try:
            html = fetch.fetch_html(url, timeout=self.timeout, session=self.session)
        except ProviderUnavailable as e:
            logger.debug(f"{self.name} unavailable: {e}")
            return None

        candidate = extract_lyrics(html)
        if not is_acceptable(candidate, self.min_length):
            logger.debug(
                f"{self.name} candidate rejected ({len(candidate)} chars) "
                f"for {artist} - {title}"
            )
            return None
        return candidate
