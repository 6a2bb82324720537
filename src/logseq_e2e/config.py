"""Centralised E2E configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/logseq_e2e/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class AppConfig(BaseModel):
    """The Logseq web app under test."""

    base_url: str = "http://localhost:3001"
    title: str = "Logseq"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class TimeoutConfig(BaseModel):
    """Wait budgets in milliseconds, passed straight to Playwright."""

    dropdown: int = 5000
    graph_parse: int = 1000 * 60 * 5


class GraphConfig(BaseModel):
    """Local graph folder opened by the E2E fixtures."""

    path: str | None = None


class Settings(BaseSettings):
    """E2E settings with automatic .env loading and type validation.

    Environment variables use double-underscore delimiter for nesting:
    ``APP__BASE_URL``, ``TIMEOUTS__GRAPH_PARSE``, ``GRAPH__PATH``, etc.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    timeouts: TimeoutConfig = TimeoutConfig()
    graph: GraphConfig = GraphConfig()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
