# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest

from spac_compliance.config.settings import get_settings

# Configuration-dependent env vars that must not leak from the host shell.
_SETTINGS_ENV = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "DEFAULT_FILER_STATUS",
    "DEFAULT_FY_END_MONTH",
    "SCHEDULE_YEARS_AHEAD",
    "COMMENT_RESPONSE_DAYS",
    "SPAC_TERM_MONTHS",
    "RUN_ID",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a clean environment and a fresh Settings singleton."""
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now() -> date:
    """Pinned reference date (Thursday) so no test depends on the wall clock."""
    return date(2026, 1, 15)
