# src/spac_compliance/domain/services/business_days.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Business-day arithmetic over the US federal holiday calendar.

Purpose:
    Classify dates as business days and add, subtract and count in
    business-day units.

Layer:
    domain/services

Notes:
    - A business day is Monday-Friday and not an observed federal holiday.
    - ``count_business_days`` is signed. For ``start <= end`` it counts the
      business days in the half-open interval ``(start, end]``; for
      ``start > end`` it returns the negated count of ``(end, start]``. This
      keeps ``count_business_days(d, add_business_days(d, n)) == n`` and
      makes "business days remaining" negative once a deadline has passed.
"""

from __future__ import annotations

from datetime import date, timedelta

from spac_compliance.domain.services.holiday_calendar import SATURDAY, is_federal_holiday
from spac_compliance.domain.services.input_guards import (
    calendar_range,
    require_count,
    require_date,
)

_ONE_DAY = timedelta(days=1)


def is_business_day(d: date) -> bool:
    """Return True if ``d`` is neither a weekend day nor an observed holiday."""
    d = require_date(d, "date")
    return d.weekday() < SATURDAY and not is_federal_holiday(d)


def _step_business_days(d: date, n: int, step: timedelta) -> date:
    current = d
    remaining = n
    with calendar_range("date"):
        while remaining > 0:
            current += step
            if is_business_day(current):
                remaining -= 1
    return current


def add_business_days(d: date, n: int) -> date:
    """Return the date ``n`` business days after ``d``.

    Args:
        d: Starting date (need not itself be a business day).
        n: Non-negative number of business days.

    Returns:
        The landing date, a business day whenever ``n > 0``.

    Raises:
        InvalidDeadlineInputError: If ``d`` is missing or ``n`` is negative, or the
            result would fall outside years 1..9999.
    """
    d = require_date(d, "date")
    n = require_count(n, "business_days")
    return _step_business_days(d, n, _ONE_DAY)


def subtract_business_days(d: date, n: int) -> date:
    """Return the date ``n`` business days before ``d``."""
    d = require_date(d, "date")
    n = require_count(n, "business_days")
    return _step_business_days(d, n, -_ONE_DAY)


def count_business_days(start: date, end: date) -> int:
    """Count business days from ``start`` to ``end`` (signed).

    Args:
        start: Reference date, typically "now".
        end: Target date, typically a deadline.

    Returns:
        Number of business days in ``(start, end]``, negated when
        ``start > end``.
    """
    start = require_date(start, "start")
    end = require_date(end, "end")
    if start > end:
        return -count_business_days(end, start)

    count = 0
    current = start
    while current < end:
        current += _ONE_DAY
        if is_business_day(current):
            count += 1
    return count


def next_business_day(d: date) -> date:
    """Return the nearest business day strictly after ``d``."""
    return add_business_days(d, 1)


def previous_business_day(d: date) -> date:
    """Return the nearest business day strictly before ``d``."""
    return subtract_business_days(d, 1)


def snap_to_previous_business_day(d: date) -> date:
    """Return ``d`` if it is a business day, else the preceding business day.

    Weekend and holiday deadlines move earlier, never later.
    """
    d = require_date(d, "date")
    if is_business_day(d):
        return d
    return previous_business_day(d)


__all__ = [
    "add_business_days",
    "count_business_days",
    "is_business_day",
    "next_business_day",
    "previous_business_day",
    "snap_to_previous_business_day",
    "subtract_business_days",
]
