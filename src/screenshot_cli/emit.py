"""
Structured event emitter.

Events are single-line JSON on stderr, distinguishable from log lines:
    {"event_type": "...", "timestamp": "...", "source": {"tool": "..."}, "data": {...}}

Stderr output is off unless enabled with configure(); extra transports
can be attached with add_handler() regardless.
"""

import json
import sys
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict], None]

EVENT_CATALOG = [
    {
        "event_type": "config.resolved",
        "data_fields": ["config_path", "source"],
    },
    {
        "event_type": "displays.enumerated",
        "data_fields": ["platform", "count"],
    },
    {
        "event_type": "operation.started",
        "data_fields": ["operation_id", "platform", "mode", "display"],
    },
    {
        "event_type": "operation.completed",
        "data_fields": ["operation_id", "platform", "mode", "display", "success", "file_path", "error_message"],
    },
    {
        "event_type": "error.handled",
        "data_fields": ["error_type", "message"],
    },
    {
        "event_type": "shutdown",
        "data_fields": [],
    },
]

_handlers: List[EventHandler] = []
_source: str = "screenshot-cli"
_stderr_enabled: bool = False


def configure(source: str, stderr: bool = False) -> None:
    """Set the source name for emitted events. Call once at startup.

    Args:
        source: Source identifier for events
        stderr: Whether to write events to stderr
    """
    global _source, _stderr_enabled
    _source = source
    _stderr_enabled = stderr


def add_handler(handler: EventHandler) -> None:
    """Register an additional event handler."""
    _handlers.append(handler)


def remove_handler(handler: EventHandler) -> None:
    """Remove a previously registered handler."""
    if handler in _handlers:
        _handlers.remove(handler)


def emit(
    event_type: str,
    data: Dict[str, Any],
    source: Optional[str] = None,
) -> dict:
    """
    Emit a structured event and return it.

    Args:
        event_type: Event type (e.g., "operation.completed")
        data: Event payload
        source: Override source name for this event
    """
    event = {
        "event_type": event_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": {
            "tool": source or _source,
        },
        "data": data,
    }

    if _stderr_enabled:
        try:
            print(json.dumps(event, default=str), file=sys.stderr, flush=True)
        except (TypeError, ValueError, OSError) as exc:
            logger.debug("Could not write event: %s", exc)

    for handler in list(_handlers):
        try:
            handler(event)
        except Exception as exc:
            logger.debug("Event handler error: %s", exc)

    return event
