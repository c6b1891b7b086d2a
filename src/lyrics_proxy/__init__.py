"""lyrics-proxy - best-effort song lyrics over HTTP."""

__version__ = "0.1.0"

from .core import LyricsResolver, LyricsResult
from .exceptions import LyricsProxyError, ValidationError

__all__ = [
    "__version__",
    "LyricsResolver",
    "LyricsResult",
    "LyricsProxyError",
    "ValidationError",
]
