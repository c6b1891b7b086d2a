"""Command-line interface using Click."""

import json
import os
import sys
from pathlib import Path

import click

from . import __version__, config
from .core.resolver import LyricsResolver, default_providers
from .exceptions import LyricsFetchError, LyricsProxyError
from .utils.logging import setup_logging


def resolve_lyrics(artist: str, title: str, timeout: float):
    """Resolve lyrics, wrapping unexpected failures in LyricsFetchError."""
    resolver = LyricsResolver(default_providers(timeout=timeout))
    try:
        return resolver.resolve(artist, title)
    except LyricsProxyError:
        raise
    except Exception as e:
        raise LyricsFetchError(f"Lyrics fetch failed: {e}") from e


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """lyrics-proxy - best-effort song lyrics lookup."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else config.LOG_LEVEL,
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.argument('artist')
@click.argument('title')
@click.option('--timeout', type=float, default=None,
              help='Per-request timeout in seconds (default: LYRICS_PROXY_TIMEOUT or 10)')
@click.option('--json', 'as_json', is_flag=True,
              help='Print the result as a JSON object')
@click.pass_context
def fetch(ctx, artist, title, timeout, as_json):
    """Look up lyrics for ARTIST and TITLE."""
    logger = ctx.obj['logger']

    if timeout is not None and timeout <= 0:
        raise click.BadParameter("--timeout must be positive")

    try:
        result = resolve_lyrics(
            artist, title, timeout if timeout is not None else config.REQUEST_TIMEOUT
        )
    except LyricsProxyError as e:
        logger.error(f"❌ {e}")
        if ctx.obj.get('verbose'):
            import traceback
            traceback.print_exc()
        sys.exit(1)

    logger.debug(f"Resolved via {result.source}")
    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(result.lyrics)


@cli.command()
@click.option('--host', default=config.DEFAULT_HOST, show_default=True,
              help='Interface to bind')
@click.option('--port', type=int, default=config.DEFAULT_PORT, show_default=True,
              help='Port to listen on')
@click.option('--reload', is_flag=True, help='Auto-reload on code changes (development only)')
@click.pass_context
def serve(ctx, host, port, reload):
    """Serve the lyrics API over HTTP."""
    import uvicorn

    if ctx.obj.get('verbose'):
        # The app configures logging from LOG_LEVEL; reload workers read the env
        config.LOG_LEVEL = "DEBUG"
        os.environ["LYRICS_PROXY_LOG_LEVEL"] = "DEBUG"

    logger = ctx.obj['logger']
    logger.info(f"Serving lyrics API at http://{host}:{port}/api/lyrics")
    uvicorn.run(
        "lyrics_proxy.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if ctx.obj.get('verbose') else "info",
    )


if __name__ == '__main__':
    cli()
