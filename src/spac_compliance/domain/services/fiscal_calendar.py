# src/spac_compliance/domain/services/fiscal_calendar.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fiscal calendar helpers for periodic SEC reporting.

Purpose:
    Resolve fiscal year and fiscal quarter boundaries from an
    organization-specific fiscal-year-end month, and classify which fiscal
    quarter an arbitrary date falls within.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No I/O.
        * No caching.
    - The fiscal-year-end month is zero-based (0=January .. 11=December).
    - A fiscal year is labelled by the calendar year in which it ends. For a
      June year end, fiscal 2026 runs July 1, 2025 - June 30, 2026, so its
      Q1 and Q2 end in calendar 2025.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Final

from spac_compliance.domain.entities.calendar import FiscalPeriod, FiscalQuarterRef
from spac_compliance.domain.enums.compliance import FiscalPeriodKind
from spac_compliance.domain.exceptions.deadlines import InvalidDeadlineInputError
from spac_compliance.domain.services.input_guards import (
    require_count,
    require_date,
    require_fy_end_month,
)

DECEMBER: Final[int] = 11
MONTHS_PER_QUARTER: Final[int] = 3


def _month_end(year: int, month0: int) -> date:
    """Return the last day of a zero-based month, normalizing overflow into ``year``."""
    year += month0 // 12
    month = month0 % 12 + 1
    return date(year, month, calendar.monthrange(year, month)[1])


def _require_quarter(quarter: int) -> int:
    quarter = require_count(quarter, "quarter", minimum=1)
    if quarter > 4:
        raise InvalidDeadlineInputError(
            "quarter must be between 1 and 4",
            details={"field": "quarter", "value": quarter},
        )
    return quarter


def fiscal_year_end(year: int, fy_end_month: int = DECEMBER) -> date:
    """Return the last calendar day of the fiscal-year-end month in ``year``.

    Raises:
        InvalidDeadlineInputError: If ``fy_end_month`` is outside 0-11.
    """
    fy_end_month = require_fy_end_month(fy_end_month)
    year = require_count(year, "year", minimum=1)
    return _month_end(year, fy_end_month)


def fiscal_year_start(year: int, fy_end_month: int = DECEMBER) -> date:
    """Return the first day of fiscal ``year``."""
    return fiscal_year_end(year - 1, fy_end_month) + timedelta(days=1)


def fiscal_quarter_end(year: int, quarter: int, fy_end_month: int = DECEMBER) -> date:
    """Return the last day of fiscal quarter ``quarter`` of fiscal ``year``.

    Quarter ``k`` ends ``3k`` months after the end of the previous fiscal
    year, so quarter 4 always coincides with :func:`fiscal_year_end`.

    Args:
        year: Fiscal year label.
        quarter: Fiscal quarter (1-4).
        fy_end_month: Zero-based fiscal-year-end month.

    Returns:
        Quarter end date, which may fall in the prior calendar year.

    Raises:
        InvalidDeadlineInputError: If ``quarter`` or ``fy_end_month`` is out of range.
    """
    fy_end_month = require_fy_end_month(fy_end_month)
    quarter = _require_quarter(quarter)
    year = require_count(year, "year", minimum=2)
    # Anchor on the previous fiscal year end and roll the month forward;
    # _month_end carries any overflow past December into the next year.
    return _month_end(year - 1, fy_end_month + MONTHS_PER_QUARTER * quarter)


def fiscal_quarter_start(year: int, quarter: int, fy_end_month: int = DECEMBER) -> date:
    """Return the first day of fiscal quarter ``quarter`` of fiscal ``year``."""
    quarter = _require_quarter(quarter)
    if quarter == 1:
        return fiscal_year_start(year, fy_end_month)
    return fiscal_quarter_end(year, quarter - 1, fy_end_month) + timedelta(days=1)


def current_fiscal_quarter(d: date, fy_end_month: int = DECEMBER) -> FiscalQuarterRef:
    """Return the fiscal quarter and fiscal year containing ``d``.

    Args:
        d: Any date.
        fy_end_month: Zero-based fiscal-year-end month.

    Returns:
        FiscalQuarterRef with the quarter (1-4) and fiscal year label.
    """
    d = require_date(d, "date")
    fy_end_month = require_fy_end_month(fy_end_month)

    month0 = d.month - 1
    months_into_year = (month0 - fy_end_month - 1) % 12
    quarter = months_into_year // MONTHS_PER_QUARTER + 1
    fiscal_year = d.year + 1 if month0 > fy_end_month else d.year
    return FiscalQuarterRef(quarter=quarter, fiscal_year=fiscal_year)


def fiscal_year_period(
    year: int,
    fy_end_month: int = DECEMBER,
    *,
    filing_deadline: date | None = None,
) -> FiscalPeriod:
    """Build the FiscalPeriod describing fiscal ``year``."""
    return FiscalPeriod(
        kind=FiscalPeriodKind.YEAR,
        fiscal_year=year,
        quarter=None,
        start_date=fiscal_year_start(year, fy_end_month),
        end_date=fiscal_year_end(year, fy_end_month),
        filing_deadline=filing_deadline,
    )


def fiscal_quarter_period(
    year: int,
    quarter: int,
    fy_end_month: int = DECEMBER,
    *,
    filing_deadline: date | None = None,
) -> FiscalPeriod:
    """Build the FiscalPeriod describing one fiscal quarter."""
    return FiscalPeriod(
        kind=FiscalPeriodKind.QUARTER,
        fiscal_year=year,
        quarter=quarter,
        start_date=fiscal_quarter_start(year, quarter, fy_end_month),
        end_date=fiscal_quarter_end(year, quarter, fy_end_month),
        filing_deadline=filing_deadline,
    )


__all__ = [
    "DECEMBER",
    "current_fiscal_quarter",
    "fiscal_quarter_end",
    "fiscal_quarter_period",
    "fiscal_quarter_start",
    "fiscal_year_end",
    "fiscal_year_period",
    "fiscal_year_start",
]
