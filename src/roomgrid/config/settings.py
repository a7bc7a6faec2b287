"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from roomgrid.config import RoomGridSettings

    # Load from environment variables (ROOMGRID_*)
    settings = RoomGridSettings()

    # Or override with explicit values
    settings = RoomGridSettings(max_search_radius=32)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoomGridSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the map engine.

    Attributes:
        max_search_radius: Largest shell radius the nearest-free search will
            try before giving up with SearchExhaustedError.
        log_level: Minimum level passed to structlog's filtering logger.
        log_file: Append log output to this file instead of stdout.
        json_logs: Render log events as JSON lines.

    Environment Variables:
        ROOMGRID_MAX_SEARCH_RADIUS
        ROOMGRID_LOG_LEVEL
        ROOMGRID_LOG_FILE
        ROOMGRID_JSON_LOGS
    """

    model_config = SettingsConfigDict(
        env_prefix="ROOMGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_search_radius: int = Field(default=256, gt=0)
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
