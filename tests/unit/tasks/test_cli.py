# tests/unit/tasks/test_cli.py
from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from spac_compliance.tasks.cli import app

runner = CliRunner()


def _invoke_json(*args: str) -> object:
    result = runner.invoke(app, list(args))
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_holidays_lists_observed_dates() -> None:
    payload = _invoke_json("holidays", "2026")

    assert len(payload) == 11
    assert payload[0]["observed_date"] == "2026-01-01"
    independence = next(h for h in payload if h["actual_date"] == "2026-07-04")
    assert independence["observed_date"] == "2026-07-03"
    assert independence["is_shifted"] is True


def test_deadline_for_material_event() -> None:
    payload = _invoke_json("deadline", "8-K", "2026-03-06", "--now", "2026-03-06")

    assert payload["filing_type"] == "8-K"
    assert payload["deadline"] == "2026-03-12"
    assert payload["business_days_remaining"] == 4
    assert payload["urgency"] == "HIGH"
    assert payload["warning_thresholds"]["critical"] == "2026-03-09"


def test_deadline_uses_configured_filer_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_FILER_STATUS", "NON_ACCELERATED")

    payload = _invoke_json("deadline", "10-K", "2025-12-31", "--now", "2026-01-15")

    assert payload["filer_status"] == "NON_ACCELERATED"
    assert payload["deadline"] == "2026-03-31"
    assert payload["days_remaining"] == 75


def test_deadline_option_overrides_configured_filer_status() -> None:
    payload = _invoke_json(
        "deadline", "10-K", "2025-12-31", "--filer-status", "LARGE_ACCELERATED", "--now", "2026-01-15"
    )
    assert payload["deadline"] == "2026-02-27"


def test_unknown_filing_type_exits_with_code_2() -> None:
    result = runner.invoke(app, ["deadline", "10-X", "2026-03-06", "--now", "2026-03-06"])

    assert result.exit_code == 2
    assert "UNKNOWN_FILING_TYPE" in result.output


def test_schedule_for_current_fiscal_year() -> None:
    payload = _invoke_json("schedule", "--years-ahead", "0", "--now", "2026-01-15")

    assert [e["filing_type"] for e in payload] == ["10-Q", "10-Q", "10-Q", "10-K"]
    assert {e["status"] for e in payload} == {"UPCOMING"}
    deadlines = [e["filing_deadline"] for e in payload]
    assert deadlines == sorted(deadlines)


def test_spac_deadlines() -> None:
    payload = _invoke_json("spac", "2024-06-15", "--now", "2026-01-15")

    assert payload["liquidation_deadline"] == "2026-06-15"
    assert payload["extension_deadline"] == "2026-05-16"
    assert payload["days_until_liquidation"] == 151
    assert payload["is_past_liquidation"] is False
    assert payload["proxy_filing_deadline"] is None


def test_spac_rejects_vote_before_ipo() -> None:
    result = runner.invoke(
        app, ["spac", "2024-06-15", "--vote-date", "2024-01-02", "--now", "2026-01-15"]
    )
    assert result.exit_code == 2
    assert "INVALID_DEADLINE_INPUT" in result.output


def test_comment_letter_deadline() -> None:
    payload = _invoke_json("comment-letter", "2026-03-02", "--now", "2026-03-13")

    assert payload["response_deadline"] == "2026-03-16"
    assert payload["response_days"] == 10
    assert payload["business_days_remaining"] == 1
    assert payload["can_request_extension"] is False


def test_failure_log_carries_flat_extra_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="spac_compliance.tasks.cli")

    runner.invoke(app, ["deadline", "10-X", "2026-03-06", "--now", "2026-03-06"])

    [failed] = [r for r in caplog.records if r.getMessage() == "cli.command.failed"]
    assert failed.command == "deadline"
    assert failed.error_code == "UNKNOWN_FILING_TYPE"
    assert not hasattr(failed, "extra")
