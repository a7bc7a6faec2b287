"""Configuration module using Pydantic Settings.

Usage:
    from roomgrid.config import RoomGridSettings

    settings = RoomGridSettings(max_search_radius=64)
"""

from roomgrid.config.settings import RoomGridSettings

__all__ = [
    "RoomGridSettings",
]
