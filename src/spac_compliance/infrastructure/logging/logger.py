# src/spac_compliance/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory that produce one JSON object per line on stderr.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * ``extra={...}`` fields are merged into the line.
    * Automatic enrichment with ``run_id`` via contextvars, so every line of a
      batch pass (one calendar build, one CLI invocation) can be correlated.
    * Fallback enrichment via record attributes or the ``RUN_ID`` environment
      variable.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_run_id",
    "set_run_context",
]

_RUN_ID_ENV_KEY = "RUN_ID"

_RUN_ID_CTX: ContextVar[str | None] = ContextVar("spac_compliance_run_id", default=None)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
    | {"message", "asctime", "taskName"}
)


def set_run_context(*, run_id: str | None = None) -> None:
    """Bind a batch correlation identifier to the current context.

    Args:
        run_id: Identifier shared by every log line of one batch pass. ``None``
            leaves the current value unchanged.
    """
    if run_id is not None:
        _RUN_ID_CTX.set(run_id)


def get_run_id() -> str | None:
    """Return the current run id from contextvars, if any."""
    return _RUN_ID_CTX.get(None)


def _json_default(value: Any) -> str:
    # Dates, enums and other non-JSON extras are rendered as strings.
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Prefer record attribute, then contextvar, then env.
        rid: str | None = (
            getattr(record, "run_id", None) or _RUN_ID_CTX.get(None) or os.getenv(_RUN_ID_ENV_KEY)
        )
        if rid:
            payload["run_id"] = rid

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        for key, value in vars(record).items():
            if key in _RESERVED_ATTRS or key in payload:
                continue
            # Nested form: logger.info("...", extra={"extra": {...}}).
            if key == "extra" and isinstance(value, dict):
                payload.update(value)
            else:
                payload[key] = value

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str
    if level is not None:
        resolved = level.upper() if isinstance(level, str) else level
    else:
        resolved = env_level.upper() if env_level else "INFO"
    root.setLevel(resolved)

    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup for global defaults.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
