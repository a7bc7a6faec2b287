"""Room identity: lightweight, stable ids."""

from roomgrid.core.identity.models import RoomId

__all__ = [
    "RoomId",
]
