"""Structured logging for the map engine.

Every module logs through get_logger(__name__); configure_logging() (or
configure_from_settings()) decides where events go and how they render.
Events are snake_case names with key/value context, e.g.
logger.debug("room_created", room=room.id, position=(x, y, z)).
"""

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog

from roomgrid.config import RoomGridSettings
from roomgrid.core.identity import RoomId

_LEVELS = logging.getLevelNamesMapping()

# One append stream per log file, shared by every configuration pointing at it.
_streams: dict[Path, TextIO] = {}


def _stream_for(log_file: Path | None) -> TextIO:
    if log_file is None:
        return sys.stdout
    path = Path(log_file).resolve()
    stream = _streams.get(path)
    if stream is None or stream.closed:
        stream = _streams[path] = path.open("a", encoding="utf-8")
    return stream


def room_id_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Render RoomId values (and collections of them) as plain integers."""
    for key, value in list(event_dict.items()):
        if isinstance(value, RoomId):
            event_dict[key] = value.value
        elif isinstance(value, (set, frozenset, list, tuple)) and value:
            if all(isinstance(v, RoomId) for v in value):
                event_dict[key] = sorted(v.value for v in value)
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
) -> None:
    """Route structlog events to stdout or log_file.

    Args:
        log_level: Minimum level name; unknown names fall back to INFO.
        log_file: Append here instead of stdout. Reconfiguring with the same
            path reuses the already open stream.
        json_logs: Render one JSON object per line instead of console output.
    """
    stream = _stream_for(log_file)
    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"),
            room_id_processor,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: RoomGridSettings) -> None:
    """Configure logging from RoomGridSettings."""
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.json_logs,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
