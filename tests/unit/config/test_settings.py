from __future__ import annotations

import pytest
from pydantic import ValidationError

from spac_compliance.config import get_settings
from spac_compliance.config.settings import Environment, Settings
from spac_compliance.domain.enums.compliance import FilerStatus


def test_settings_defaults() -> None:
    s = Settings(_env_file=None)  # type: ignore[call-arg]

    assert s.environment is Environment.DEVELOPMENT
    assert s.log_level == "INFO"
    assert s.default_filer_status is FilerStatus.LARGE_ACCELERATED
    assert s.default_fy_end_month == 11
    assert s.schedule_years_ahead == 2
    assert s.comment_response_days == 10
    assert s.spac_term_months == 24


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings should hydrate deterministically from environment variables."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_FILER_STATUS", "non_accelerated")
    monkeypatch.setenv("DEFAULT_FY_END_MONTH", "5")
    monkeypatch.setenv("SCHEDULE_YEARS_AHEAD", "4")

    s = Settings(_env_file=None)  # type: ignore[call-arg]

    assert s.environment is Environment.TEST
    assert s.log_level == "DEBUG"
    assert s.default_filer_status is FilerStatus.NON_ACCELERATED
    assert s.default_fy_end_month == 5
    assert s.schedule_years_ahead == 4


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("DEFAULT_FY_END_MONTH", "12"),
        ("SCHEDULE_YEARS_AHEAD", "11"),
        ("COMMENT_RESPONSE_DAYS", "0"),
        ("SPAC_TERM_MONTHS", "61"),
        ("DEFAULT_FILER_STATUS", "MEGA_CAP"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_settings_reject_out_of_range_values(
    monkeypatch: pytest.MonkeyPatch, key: str, value: str
) -> None:
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_settings_forbid_extra_fields() -> None:
    """Model should reject unexpected fields."""
    with pytest.raises(ValidationError):
        Settings.model_validate({"environment": "test", "unexpected_field": "boom"})


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_get_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPAC_TERM_MONTHS", "0")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()
