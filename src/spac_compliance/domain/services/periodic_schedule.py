# src/spac_compliance/domain/services/periodic_schedule.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Periodic filing schedule generator.

Purpose:
    Project annual (10-K) and quarterly (10-Q) report deadlines forward
    across a window of fiscal years.

Layer:
    domain/services

Notes:
    - Pure domain logic; "now" is an explicit argument.
    - Fiscal quarter 4 has no 10-Q: the annual report covers it.
    - FILED is never assigned here; it needs an external signal.
"""

from __future__ import annotations

from datetime import date

from spac_compliance.domain.entities.calendar import FiscalPeriod
from spac_compliance.domain.entities.deadlines import PeriodicFilingSchedule
from spac_compliance.domain.enums.compliance import FilerStatus, FilingType, ScheduleStatus
from spac_compliance.domain.services.deadline_calculator import calculate_filing_deadline
from spac_compliance.domain.services.filing_rule_catalog import (
    CONSERVATIVE_FILER_STATUS,
    coerce_filer_status,
)
from spac_compliance.domain.services.fiscal_calendar import (
    DECEMBER,
    fiscal_quarter_period,
    fiscal_year_period,
)
from spac_compliance.domain.services.input_guards import (
    require_count,
    require_date,
    require_fy_end_month,
)

QUARTERLY_REPORT_QUARTERS = (1, 2, 3)


def schedule_status(period_end: date, deadline: date, *, now: date) -> ScheduleStatus:
    """Classify a calendar entry relative to ``now``.

    OVERDUE once the deadline has passed, UPCOMING while the period is still
    open, DUE in between.
    """
    if deadline < now:
        return ScheduleStatus.OVERDUE
    if now < period_end:
        return ScheduleStatus.UPCOMING
    return ScheduleStatus.DUE


def _entry(
    filing_type: FilingType,
    period: FiscalPeriod,
    filer_status: FilerStatus,
    now: date,
) -> PeriodicFilingSchedule:
    calc = calculate_filing_deadline(filing_type, period.end_date, filer_status, now=now)
    dated_period = FiscalPeriod(
        kind=period.kind,
        fiscal_year=period.fiscal_year,
        quarter=period.quarter,
        start_date=period.start_date,
        end_date=period.end_date,
        filing_deadline=calc.deadline,
    )
    return PeriodicFilingSchedule(
        filing_type=filing_type,
        period=dated_period,
        period_end_date=period.end_date,
        filing_deadline=calc.deadline,
        status=schedule_status(period.end_date, calc.deadline, now=now),
    )


def generate_periodic_filing_schedule(
    fy_end_month: int = DECEMBER,
    filer_status: FilerStatus | str | None = None,
    years_ahead: int = 2,
    *,
    now: date,
) -> tuple[PeriodicFilingSchedule, ...]:
    """Build the periodic report calendar from ``now.year`` through ``now.year + years_ahead``.

    Args:
        fy_end_month:
            Zero-based fiscal-year-end month.
        filer_status:
            Filer classification; defaults to the most conservative one.
        years_ahead:
            Number of fiscal years beyond the current one to include (>= 0).
        now:
            Reference date for the window and entry statuses.

    Returns:
        Entries sorted ascending by filing deadline (ties by period end, then
        filing type).

    Raises:
        InvalidDeadlineInputError: On an out-of-range month or negative horizon.
        UnknownFilerStatusError: If ``filer_status`` is not recognized.
    """
    fy_end_month = require_fy_end_month(fy_end_month)
    years_ahead = require_count(years_ahead, "years_ahead")
    today = require_date(now, "now")
    status = (
        CONSERVATIVE_FILER_STATUS if filer_status is None else coerce_filer_status(filer_status)
    )

    schedule: list[PeriodicFilingSchedule] = []
    for year in range(today.year, today.year + years_ahead + 1):
        schedule.append(
            _entry(FilingType.FORM_10K, fiscal_year_period(year, fy_end_month), status, today)
        )
        for quarter in QUARTERLY_REPORT_QUARTERS:
            schedule.append(
                _entry(
                    FilingType.FORM_10Q,
                    fiscal_quarter_period(year, quarter, fy_end_month),
                    status,
                    today,
                )
            )

    schedule.sort(key=lambda e: (e.filing_deadline, e.period_end_date, e.filing_type.value))
    return tuple(schedule)


__all__ = ["generate_periodic_filing_schedule", "schedule_status"]
