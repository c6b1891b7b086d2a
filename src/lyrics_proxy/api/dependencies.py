"""
FastAPI dependencies.

A fresh resolver is built per request; nothing is shared between calls.
Tests swap it out through ``app.dependency_overrides[get_resolver]``.
"""

from .. import config
from ..core.resolver import LyricsResolver, default_providers


def get_resolver() -> LyricsResolver:
    return LyricsResolver(default_providers(timeout=config.REQUEST_TIMEOUT))
