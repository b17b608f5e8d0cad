# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging

import pytest

from spac_compliance.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
    get_run_id,
    set_run_context,
)


def _capture_log(record_msg: str, level: int = logging.INFO, **extra) -> dict:
    """Emit a log record and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    fmt = _JsonFormatter()
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=123,
        msg=record_msg,
        args=(),
        exc_info=None,
        extra=extra or None,
    )
    return json.loads(fmt.format(record))


def _json_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h.formatter, _JsonFormatter)]


@pytest.fixture
def clean_root() -> logging.Logger:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_root_logging_installs_json_handler(
    monkeypatch: pytest.MonkeyPatch, clean_root: logging.Logger
) -> None:
    """Root logger should get a JSON formatter and respect LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_root_logging()
    assert clean_root.level == logging.DEBUG
    assert len(_json_handlers(clean_root)) == 1


def test_configure_root_logging_is_idempotent(clean_root: logging.Logger) -> None:
    configure_root_logging("info")
    configure_root_logging("warning")
    assert len(_json_handlers(clean_root)) == 1
    assert clean_root.level == logging.WARNING


def test_json_formatter_basic_fields() -> None:
    """Formatter should emit ts, level, logger and message."""
    payload = _capture_log("hello-world")
    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_merges_extra_fields() -> None:
    payload = _capture_log("calendar", spac_id="ACME", alerts=3)
    assert payload["spac_id"] == "ACME"
    assert payload["alerts"] == 3


def test_json_formatter_flattens_nested_extra() -> None:
    payload = _capture_log("cli", extra={"command": "deadline"})
    assert payload["command"] == "deadline"
    assert "extra" not in payload


def test_json_formatter_renders_dates_as_iso() -> None:
    from datetime import date

    payload = _capture_log("deadline", deadline=date(2026, 3, 31))
    assert payload["deadline"] == "2026-03-31"


def test_run_id_from_record_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run id comes from the record, then the contextvar, then RUN_ID."""
    import contextvars

    monkeypatch.setenv("RUN_ID", "env-run")
    # Fresh context: no run id bound by earlier tests.
    payload = contextvars.Context().run(_capture_log, "env")
    assert payload["run_id"] == "env-run"

    assert _capture_log("record", run_id="rec-run")["run_id"] == "rec-run"


def test_set_run_context_binds_run_id() -> None:
    import contextvars

    def _in_context() -> dict:
        set_run_context(run_id="batch-42")
        assert get_run_id() == "batch-42"
        return _capture_log("ctx")

    payload = contextvars.copy_context().run(_in_context)
    assert payload["run_id"] == "batch-42"


def test_json_formatter_includes_exception_info() -> None:
    """Formatter should add exc_type and exc_message for errors with exc_info."""
    logger = get_json_logger("test.logger.exc")
    try:
        raise ValueError("boom")
    except ValueError:
        import sys

        record = logger.makeRecord(
            logger.name, logging.ERROR, "f", 1, "failure", (), sys.exc_info()
        )

    payload = json.loads(_JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["exc_type"] == "ValueError"
    assert "boom" in payload["exc_message"]
