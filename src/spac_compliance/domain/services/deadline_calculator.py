# src/spac_compliance/domain/services/deadline_calculator.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Filing deadline calculator.

Purpose:
    Turn a filing type, a triggering date and a filer classification into a
    full DeadlineCalculation: the deadline itself, time remaining, overdue
    flag, warning thresholds and urgency tier.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No I/O.
        * "now" is always an explicit argument; the wall clock is never read.
    - Every deadline is snapped backward to a business day.
    - Urgency thresholds sit 3/7/14 business days before the deadline.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Final

from spac_compliance.domain.entities.deadlines import DeadlineCalculation, WarningThresholds
from spac_compliance.domain.enums.compliance import (
    DeadlineStatus,
    DeadlineUnit,
    FilerStatus,
    FilingType,
    UrgencyTier,
)
from spac_compliance.domain.services.business_days import (
    add_business_days,
    count_business_days,
    snap_to_previous_business_day,
    subtract_business_days,
)
from spac_compliance.domain.services.filing_rule_catalog import (
    CONSERVATIVE_FILER_STATUS,
    coerce_filer_status,
    filer_deadline_days,
    get_filing_rule,
)
from spac_compliance.domain.services.input_guards import calendar_range, require_date

CRITICAL_THRESHOLD_BUSINESS_DAYS: Final[int] = 3
HIGH_THRESHOLD_BUSINESS_DAYS: Final[int] = 7
MEDIUM_THRESHOLD_BUSINESS_DAYS: Final[int] = 14

DUE_SOON_CALENDAR_DAYS: Final[int] = 7
UPCOMING_CALENDAR_DAYS: Final[int] = 30


def warning_thresholds(deadline: date) -> WarningThresholds:
    """Return the critical/high/medium escalation dates for ``deadline``."""
    return WarningThresholds(
        critical=subtract_business_days(deadline, CRITICAL_THRESHOLD_BUSINESS_DAYS),
        high=subtract_business_days(deadline, HIGH_THRESHOLD_BUSINESS_DAYS),
        medium=subtract_business_days(deadline, MEDIUM_THRESHOLD_BUSINESS_DAYS),
    )


def classify_urgency(deadline: date, thresholds: WarningThresholds, *, now: date) -> UrgencyTier:
    """Classify how urgent a deadline is as of ``now``.

    Returns:
        CRITICAL if overdue or on/after the critical threshold, HIGH on/after
        the high threshold, MEDIUM on/after the medium threshold, else LOW.
    """
    now = require_date(now, "now")
    if deadline < now or now >= thresholds.critical:
        return UrgencyTier.CRITICAL
    if now >= thresholds.high:
        return UrgencyTier.HIGH
    if now >= thresholds.medium:
        return UrgencyTier.MEDIUM
    return UrgencyTier.LOW


def calculate_filing_deadline(
    filing_type: FilingType | str,
    base_date: date,
    filer_status: FilerStatus | str | None = None,
    *,
    now: date,
) -> DeadlineCalculation:
    """Compute the deadline for one filing obligation.

    Args:
        filing_type:
            Filing type (enum member, member name or SEC form code).
        base_date:
            Triggering date: the period end for periodic reports, the event
            date for event-based filings.
        filer_status:
            Filer classification. Only annual and quarterly reports depend on
            it; when omitted the most conservative classification (shortest
            windows) is used.
        now:
            Reference date for remaining-time, overdue and urgency fields.

    Returns:
        A fresh DeadlineCalculation.

    Raises:
        UnknownFilingTypeError: If ``filing_type`` is not in the catalog.
        UnknownFilerStatusError: If ``filer_status`` is not recognized.
        InvalidDeadlineInputError: If ``base_date`` or ``now`` is missing, or the
            deadline would fall outside years 1..9999.
    """
    rule = get_filing_rule(filing_type)
    status = (
        CONSERVATIVE_FILER_STATUS if filer_status is None else coerce_filer_status(filer_status)
    )
    base = require_date(base_date, "base_date")
    today = require_date(now, "now")

    days_allowed = filer_deadline_days(rule.filing_type, status)
    is_business_days = rule.unit is DeadlineUnit.BUSINESS_DAYS
    with calendar_range("base_date"):
        if is_business_days:
            raw_deadline = add_business_days(base, days_allowed)
        else:
            raw_deadline = base + timedelta(days=days_allowed)
        deadline = snap_to_previous_business_day(raw_deadline)
        thresholds = warning_thresholds(deadline)

    return DeadlineCalculation(
        filing_type=rule.filing_type,
        base_date=base,
        deadline=deadline,
        is_business_days=is_business_days,
        days_allowed=days_allowed,
        days_remaining=(deadline - today).days,
        business_days_remaining=count_business_days(today, deadline),
        is_overdue=deadline < today,
        urgency=classify_urgency(deadline, thresholds, now=today),
        warning_thresholds=thresholds,
        filer_status=status,
    )


def deadline_status(deadline: date, *, now: date) -> DeadlineStatus:
    """Bucket a deadline for display: overdue, due today, due soon, upcoming or future."""
    deadline = require_date(deadline, "deadline")
    now = require_date(now, "now")
    remaining = (deadline - now).days
    if remaining < 0:
        return DeadlineStatus.OVERDUE
    if remaining == 0:
        return DeadlineStatus.DUE_TODAY
    if remaining <= DUE_SOON_CALENDAR_DAYS:
        return DeadlineStatus.DUE_SOON
    if remaining <= UPCOMING_CALENDAR_DAYS:
        return DeadlineStatus.UPCOMING
    return DeadlineStatus.FUTURE


def format_deadline(d: date) -> str:
    """Render a date as ``Mar 31, 2026``."""
    return f"{d:%b} {d.day}, {d.year}"


__all__ = [
    "CRITICAL_THRESHOLD_BUSINESS_DAYS",
    "HIGH_THRESHOLD_BUSINESS_DAYS",
    "MEDIUM_THRESHOLD_BUSINESS_DAYS",
    "calculate_filing_deadline",
    "classify_urgency",
    "deadline_status",
    "format_deadline",
    "warning_thresholds",
]
