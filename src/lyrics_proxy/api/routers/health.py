"""
Health check endpoint for monitoring.
"""

import time

from fastapi import APIRouter, Depends

from ... import __version__
from ...core.resolver import LyricsResolver
from ..dependencies import get_resolver
from ..models import HealthStatus

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


@router.get("", response_model=HealthStatus)
def health_check(resolver: LyricsResolver = Depends(get_resolver)):
    """
    Liveness check.

    Reports the configured provider chain without contacting any provider.
    """
    providers = {
        provider.name: f"#{position} (timeout {provider.timeout:g}s)"
        for position, provider in enumerate(resolver.providers, start=1)
    }
    return HealthStatus(
        status="healthy",
        version=__version__,
        uptime=time.time() - _server_start_time,
        providers=providers,
    )
