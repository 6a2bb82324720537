"""E2E test configuration.

Auto-applies the 'e2e' marker to all tests in this directory.
Skip with: pytest -m "not e2e"

These tests drive a running Logseq web build (``APP__BASE_URL``, default
http://localhost:3001). When nothing answers there, every test in this
directory is skipped at collection time so no browser is launched.

Provides:
- fresh_page: Fresh browser context + page per test, Logseq loaded
- graph_page: fresh_page with the folder at ``GRAPH__PATH`` loaded as a graph
"""

from __future__ import annotations

import socket
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import pytest

from logseq_e2e.config import get_settings
from logseq_e2e.graph import load_local_graph

if TYPE_CHECKING:
    from collections.abc import Generator

    from playwright.sync_api import Browser, Page


def _server_reachable(base_url: str) -> bool:
    parts = urlsplit(base_url)
    port = parts.port or (443 if parts.scheme == "https" else 80)
    try:
        host = parts.hostname or "localhost"
        with socket.create_connection((host, port), timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Add e2e marker to all tests in this directory; skip if Logseq is down."""
    e2e_items = [item for item in items if "/e2e/" in str(item.fspath)]
    if not e2e_items:
        return

    base_url = get_settings().app.base_url
    skip = None
    if not _server_reachable(base_url):
        skip = pytest.mark.skip(reason=f"Logseq not reachable at {base_url}")

    for item in e2e_items:
        item.add_marker(pytest.mark.e2e)
        if skip is not None:
            item.add_marker(skip)


@pytest.fixture
def fresh_page(browser: Browser) -> Generator[Page]:
    """Provide an isolated page with the Logseq app loaded.

    A new context per test means no shared localStorage or IndexedDB,
    so graphs added by one test are not visible to the next.
    """
    context = browser.new_context()
    page = context.new_page()
    page.goto(get_settings().app.base_url)
    page.wait_for_load_state("domcontentloaded")

    yield page

    page.close()
    context.close()


@pytest.fixture
def graph_page(fresh_page: Page) -> Page:
    """fresh_page with the configured local graph folder loaded."""
    graph_path = get_settings().graph.path
    if not graph_path:
        pytest.skip("GRAPH__PATH not set")
    load_local_graph(fresh_page, graph_path)
    return fresh_page
