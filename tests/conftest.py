"""Test configuration and fixtures.

Provides reusable fixtures for:
- Fake requests responses and sessions
- lyrics.ovh API bodies
- Search proxy HTML pages
- Stub providers for resolver tests
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest
import requests


def pytest_addoption(parser):
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="Run tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    run_network = config.getoption("--run-network") or os.getenv(
        "RUN_INTEGRATION_TESTS"
    ) == "1"
    if run_network:
        return

    skip_network = pytest.mark.skip(
        reason="requires network access (use --run-network or RUN_INTEGRATION_TESTS=1)"
    )
    for item in items:
        if "network" in item.keywords or "integration" in item.keywords:
            item.add_marker(skip_network)


# =============================================================================
# Logging isolation
# =============================================================================


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging (e.g. CLI tests)."""
    yield
    logger = logging.getLogger("lyrics_proxy")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# HTTP fakes
# =============================================================================


class FakeResponse:
    """Just enough of requests.Response for the fetch helpers."""

    def __init__(self, text="", json_data=None, status_code=200):
        self.text = text
        self._json_data = json_data
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._json_data, Exception):
            raise self._json_data
        return self._json_data


class FakeSession:
    """Returns queued responses in order; an Exception in the queue is raised."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        if not self._responses:
            raise requests.ConnectionError("no response")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class StubProvider:
    """Provider double that records calls and returns a fixed answer."""

    def __init__(self, name: str, answer: Optional[str] = None, error: Exception = None):
        self.name = name
        self.answer = answer
        self.error = error
        self.timeout = 1.0
        self.calls: List[tuple] = []

    def attempt(self, artist, title):
        self.calls.append((artist, title))
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def stub_provider():
    return StubProvider


# =============================================================================
# Provider payloads
# =============================================================================


@pytest.fixture
def ovh_lyrics_body():
    """lyrics.ovh response for a song it knows."""
    return {"lyrics": "Is this the real life?\nIs this just fantasy?"}


@pytest.fixture
def ovh_not_found_body():
    """lyrics.ovh response when it has no lyrics."""
    return {"error": "No lyrics found"}


@pytest.fixture
def search_page_html():
    """Rendered search page whose text after "Lyrics" is long enough to accept."""
    return (
        "<html><head><title>Results</title></head><body>"
        "<script type=\"text/javascript\">var lyrics = 'decoy';</script>"
        "<div>Lyrics: line one\nline two\n\n\nline three</div>\n\n"
        "<p>and a long enough closing line to get past the length threshold</p>"
        "</body></html>"
    )


@pytest.fixture
def short_search_page_html():
    """Rendered search page whose candidate text is too short."""
    return "<html><body><p>Lyrics: ok</p></body></html>"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
