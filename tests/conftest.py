"""Shared pytest fixtures for logseq-e2e tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv

from logseq_e2e.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

load_dotenv()


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None]:
    """Drop the cached Settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_page() -> MagicMock:
    """A MagicMock standing in for ``playwright.sync_api.Page``.

    ``locator()`` returns the same child mock for every selector, so
    tests configure ``mock_page.locator.return_value`` directly.
    """
    return MagicMock()
