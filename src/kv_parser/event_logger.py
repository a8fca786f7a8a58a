"""Structured event logger for parse and query runs.

Wraps :mod:`logging` so that each event of a run becomes one JSON object on
stderr.  All events of one CLI invocation share a ``run_id``:

* ``store_built``: input consumed; carries ``lines_read`` and ``records``.
* ``query_answered``: carries ``mode`` (``"all"`` or ``"lookup"``) and
  ``hits``.
* ``key_not_found``: carries the missing ``key``.

Events are INFO.  The logger starts at WARNING so a plain run keeps stderr
for the user-facing messages; ``KV_PARSER_LOG_LEVEL=INFO`` turns them on.
Individual skipped input lines are never reported.

Usage::

    from kv_parser.event_logger import get_event_logger

    logger = get_event_logger()
    logger.log_event("store_built", run_id="abc", lines_read=4, records=3)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_LOGGER_NAME = "kv_parser.events"
_DEFAULT_LEVEL = logging.WARNING


class _JsonFormatter(logging.Formatter):
    """Render an event as ``{"timestamp", "level", "logger", "event", ...}``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "_structured", None) or {})
        return json.dumps(payload, default=str)


def _install_handler(logger: logging.Logger) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(_DEFAULT_LEVEL)
    # Events stay off the root logger so host applications don't reformat them.
    logger.propagate = False


def get_event_logger(name: str = _LOGGER_NAME) -> "EventLogger":
    """Return an :class:`EventLogger` for the parser's event stream.

    Wrappers for the same *name* share one :class:`logging.Logger`, so a
    level set by the CLI applies to the events emitted from
    :mod:`kv_parser.query`.
    """
    return EventLogger(name)


class EventLogger:
    """JSON event emitter for one parser event stream.

    Parameters
    ----------
    name : str
        Logger name (passed to :func:`logging.getLogger`).  The JSON stderr
        handler is attached the first time a name is seen.
    """

    def __init__(self, name: str = _LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            _install_handler(self._logger)

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: int) -> None:
        """Drop events below *level* (a :mod:`logging` constant)."""
        self._logger.setLevel(level)

    def log_event(
        self,
        event: str,
        *,
        run_id: Optional[str] = None,
        level: int = logging.INFO,
        **fields: Any,
    ) -> Dict[str, Any]:
        """Emit *event* with its fields and return the payload dict.

        The payload is built and returned even when *level* is below the
        logger threshold and nothing is written.

        Parameters
        ----------
        event : str
            Event name, e.g. ``"store_built"``.
        run_id : str, optional
            Identifier shared by every event of one invocation.
        level : int
            :mod:`logging` level (default ``INFO``).
        **fields
            Event data such as ``records=3`` or ``key="role"``.
        """
        structured: Dict[str, Any] = {"event": event}
        if run_id is not None:
            structured["run_id"] = run_id
        structured.update(fields)

        if self._logger.isEnabledFor(level):
            record = self._logger.makeRecord(
                self._logger.name, level, "(event)", 0, event, (), None
            )
            record._structured = structured  # type: ignore[attr-defined]
            self._logger.handle(record)
        return structured
