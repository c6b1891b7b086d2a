"""Configuration settings for lyrics-proxy."""

import os

from .exceptions import ConfigError

# Outbound requests (can be overridden via environment variables)
REQUEST_TIMEOUT = float(os.getenv("LYRICS_PROXY_TIMEOUT", "10"))

# Primary provider: lyrics.ovh JSON API, queried as /<artist>/<title>
LYRICS_OVH_BASE_URL = os.getenv("LYRICS_PROXY_OVH_URL", "https://api.lyrics.ovh/v1")

# Fallback provider: text-rendering proxy wrapping a search engine query
SEARCH_PROXY_URL = os.getenv(
    "LYRICS_PROXY_SEARCH_PROXY_URL", "https://textise.net/showtext.aspx"
)
SEARCH_ENGINE_URL = os.getenv(
    "LYRICS_PROXY_SEARCH_ENGINE_URL", "https://www.google.com/search"
)

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/143.0.0.0 Safari/537.36"
)

# Scraped text must be longer than this to be returned as lyrics
MIN_SCRAPED_LENGTH = 50

LYRICS_NOT_FOUND = "Lyrics not found."

LOG_LEVEL = os.getenv("LYRICS_PROXY_LOG_LEVEL", "INFO")

# Server defaults for `lyrics-proxy serve`
DEFAULT_HOST = os.getenv("LYRICS_PROXY_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("LYRICS_PROXY_PORT", "8000"))

# Comma-separated list of origins allowed to call the API from a browser
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("LYRICS_PROXY_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_http_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def validate_config() -> None:
    """Validate configuration values."""
    if REQUEST_TIMEOUT <= 0:
        raise ConfigError("Request timeout must be positive")

    for name, url in (
        ("lyrics.ovh base URL", LYRICS_OVH_BASE_URL),
        ("search proxy URL", SEARCH_PROXY_URL),
        ("search engine URL", SEARCH_ENGINE_URL),
    ):
        if not _is_http_url(url):
            raise ConfigError(f"Invalid {name}: {url}")

    if LOG_LEVEL.upper() not in _VALID_LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {LOG_LEVEL}")

    if not 0 < DEFAULT_PORT < 65536:
        raise ConfigError(f"Invalid port: {DEFAULT_PORT}")


# Validate config on import
validate_config()
