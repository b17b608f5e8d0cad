# src/spac_compliance/domain/services/holiday_calendar.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""US federal holiday calendar.

Purpose:
    Compute the eleven US federal holidays for a year, each adjusted to its
    observed weekday, for use by business-day arithmetic.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No I/O.
        * No caching; every call recomputes. Callers wanting speed may
          memoize by year externally.
    - Observance: Saturday holidays are observed the preceding Friday,
      Sunday holidays the following Monday. New Year's Day falling on a
      Saturday is therefore observed on December 31 of the prior year.
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import date, timedelta
from typing import Final

from spac_compliance.domain.entities.calendar import FederalHoliday
from spac_compliance.domain.exceptions.deadlines import InvalidDeadlineInputError

MONDAY: Final[int] = 0
THURSDAY: Final[int] = 3
SATURDAY: Final[int] = 5
SUNDAY: Final[int] = 6


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Return the ``n``-th occurrence of ``weekday`` in a month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        weekday: Day of week (0=Monday .. 6=Sunday).
        n: Occurrence, starting at 1.

    Returns:
        The matching date.
    """
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + (n - 1) * 7)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Return the last occurrence of ``weekday`` in a month."""
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() - weekday) % 7)


def observed_date(actual: date) -> date:
    """Shift a weekend holiday to its observed weekday."""
    if actual.weekday() == SATURDAY:
        return actual - timedelta(days=1)
    if actual.weekday() == SUNDAY:
        return actual + timedelta(days=1)
    return actual


_HOLIDAY_RULES: Final[tuple[tuple[str, Callable[[int], date]], ...]] = (
    ("New Year's Day", lambda y: date(y, 1, 1)),
    ("Martin Luther King Jr. Day", lambda y: nth_weekday_of_month(y, 1, MONDAY, 3)),
    ("Presidents' Day", lambda y: nth_weekday_of_month(y, 2, MONDAY, 3)),
    ("Memorial Day", lambda y: last_weekday_of_month(y, 5, MONDAY)),
    ("Juneteenth", lambda y: date(y, 6, 19)),
    ("Independence Day", lambda y: date(y, 7, 4)),
    ("Labor Day", lambda y: nth_weekday_of_month(y, 9, MONDAY, 1)),
    ("Columbus Day", lambda y: nth_weekday_of_month(y, 10, MONDAY, 2)),
    ("Veterans Day", lambda y: date(y, 11, 11)),
    ("Thanksgiving Day", lambda y: nth_weekday_of_month(y, 11, THURSDAY, 4)),
    ("Christmas Day", lambda y: date(y, 12, 25)),
)


def _require_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDeadlineInputError("year must be an integer", details={"year": repr(year)})
    if not 1 <= year <= 9999:
        raise InvalidDeadlineInputError("year out of range", details={"year": year})
    return year


def federal_holiday_calendar(year: int) -> tuple[FederalHoliday, ...]:
    """Return the named federal holidays of ``year`` in calendar order.

    Args:
        year: Calendar year.

    Returns:
        Tuple of FederalHoliday records, ordered by observed date.

    Raises:
        InvalidDeadlineInputError: If ``year`` is not a supported integer.
    """
    _require_year(year)
    holidays: list[FederalHoliday] = []
    for name, rule in _HOLIDAY_RULES:
        actual = rule(year)
        holidays.append(
            FederalHoliday(
                name=name,
                year=year,
                actual_date=actual,
                observed_date=observed_date(actual),
            )
        )
    return tuple(sorted(holidays, key=lambda h: h.observed_date))


def federal_holidays(year: int) -> tuple[date, ...]:
    """Return the ordered, de-duplicated observed holiday dates for ``year``."""
    return tuple(sorted({h.observed_date for h in federal_holiday_calendar(year)}))


def is_federal_holiday(d: date) -> bool:
    """Return True if ``d`` is an observed federal holiday.

    December 31 is also checked against the following year's observed New
    Year's Day.
    """
    if d in federal_holidays(d.year):
        return True
    if d.month == 12 and d.day == 31 and d.year < date.max.year:
        return d in federal_holidays(d.year + 1)
    return False


__all__ = [
    "federal_holiday_calendar",
    "federal_holidays",
    "is_federal_holiday",
    "last_weekday_of_month",
    "nth_weekday_of_month",
    "observed_date",
]
