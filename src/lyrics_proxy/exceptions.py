"""Custom exceptions for lyrics-proxy."""

class LyricsProxyError(Exception):
    """Base exception for lyrics-proxy."""
    pass

class ConfigError(LyricsProxyError):
    """Invalid configuration value."""
    pass

class ValidationError(LyricsProxyError):
    """Invalid input parameters."""
    pass

class ProviderUnavailable(LyricsProxyError):
    """A lyrics provider could not produce a usable response."""
    pass

class LyricsFetchError(LyricsProxyError):
    """Unexpected failure while resolving lyrics."""
    pass
