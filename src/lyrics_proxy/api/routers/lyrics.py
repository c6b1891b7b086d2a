"""
Lyrics lookup endpoint.

Any HTTP method is accepted; only the ``artist`` and ``title`` query
parameters are read.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from ...core.resolver import LyricsResolver
from ...exceptions import ValidationError
from ...utils.logging import get_logger
from ..dependencies import get_resolver
from ..models import ErrorResponse, LyricsResponse

logger = get_logger(__name__)

LYRICS_FETCH_FAILED = "Lyrics fetch failed"

# Advertised in the OpenAPI schema; requests are not restricted to these
DOCUMENTED_METHODS = ["GET", "POST"]


class AnyMethodRoute(APIRoute):
    """Route that serves every HTTP method, including unlisted ones like TRACE."""

    def matches(self, scope: Scope):
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter(route_class=AnyMethodRoute)


@router.api_route(
    "",
    methods=DOCUMENTED_METHODS,
    response_model=LyricsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_lyrics(
    artist: Optional[str] = Query(None, description="Artist name"),
    title: Optional[str] = Query(None, description="Song title"),
    resolver: LyricsResolver = Depends(get_resolver),
):
    """
    Best-effort lyrics for a song.

    Returns 200 with the lyrics (or "Lyrics not found."), 400 when artist or
    title is missing, and 500 with a generic message on unexpected failure.
    """
    try:
        result = resolver.resolve(artist, title)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception:
        logger.exception("lyrics api error")
        return JSONResponse(status_code=500, content={"error": LYRICS_FETCH_FAILED})

    return LyricsResponse(**result.to_dict())
