"""Core lyrics resolution."""

from .models import LyricsRequest, LyricsResult
from .providers import LyricsOvhProvider, LyricsProvider, SearchProxyProvider
from .resolver import LyricsResolver, default_providers

__all__ = [
    "LyricsRequest",
    "LyricsResult",
    "LyricsProvider",
    "LyricsOvhProvider",
    "SearchProxyProvider",
    "LyricsResolver",
    "default_providers",
]
