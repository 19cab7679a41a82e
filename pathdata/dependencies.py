"""FastAPI dependency injection."""

from __future__ import annotations

from pathdata.config import Settings, settings
from pathdata.engine.config import ParserConfig


def get_settings() -> Settings:
    return settings


def get_parser_config() -> ParserConfig:
    return settings.parser_config()
