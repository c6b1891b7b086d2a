"""
API models for the lyrics endpoint.

These mirror the JSON bodies the endpoint has always returned: a flat
lyrics object on success, a single ``error`` string otherwise.
"""

from pydantic import BaseModel, Field
from typing import Dict


class LyricsResponse(BaseModel):
    """Successful lookup, including the not-found placeholder."""
    artist: str = Field(..., description="Artist as given in the request")
    title: str = Field(..., description="Title as given in the request")
    lyrics: str = Field(..., description="Lyrics text or the not-found placeholder")


class ErrorResponse(BaseModel):
    """Error response format."""
    error: str = Field(..., description="Error message")


class HealthStatus(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    uptime: float = Field(..., description="Uptime in seconds")
    providers: Dict[str, str] = Field(..., description="Configured lyrics providers")
