# src/spac_compliance/domain/services/event_deadlines.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Event-triggered filing deadlines.

Purpose:
    One-shot calculators for episodic triggers: material events, de-SPAC
    closings, insider transactions and 5% beneficial-ownership crossings.
    Each rule is the function itself; there is no catalog lookup.

Layer:
    domain/services
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Final

from spac_compliance.domain.entities.deadlines import EventBasedDeadline
from spac_compliance.domain.enums.compliance import DeadlineUnit, FilingType
from spac_compliance.domain.services.business_days import (
    add_business_days,
    snap_to_previous_business_day,
)
from spac_compliance.domain.services.input_guards import calendar_range, require_date


@dataclass(frozen=True, slots=True)
class _EventRule:
    id_prefix: str
    filing_type: FilingType
    event_type: str
    unit: DeadlineUnit
    days: int
    description: str


MATERIAL_EVENT_RULE: Final = _EventRule(
    id_prefix="8k",
    filing_type=FilingType.FORM_8K,
    event_type="Material Event",
    unit=DeadlineUnit.BUSINESS_DAYS,
    days=4,
    description="Form 8-K must be filed within 4 business days of triggering event",
)
DESPAC_CLOSING_RULE: Final = _EventRule(
    id_prefix="super8k",
    filing_type=FilingType.SUPER_8K,
    event_type="De-SPAC Transaction Closing",
    unit=DeadlineUnit.BUSINESS_DAYS,
    days=4,
    description="Super 8-K must be filed within 4 business days of transaction closing",
)
INSIDER_TRANSACTION_RULE: Final = _EventRule(
    id_prefix="form4",
    filing_type=FilingType.FORM_4,
    event_type="Insider Transaction",
    unit=DeadlineUnit.BUSINESS_DAYS,
    days=2,
    description="Form 4 must be filed within 2 business days of insider transaction",
)
OWNERSHIP_THRESHOLD_RULE: Final = _EventRule(
    id_prefix="13d",
    filing_type=FilingType.SC_13D,
    event_type="5% Beneficial Ownership Acquired",
    unit=DeadlineUnit.CALENDAR_DAYS,
    days=10,
    description="Schedule 13D must be filed within 10 calendar days of crossing 5% threshold",
)


def _apply(rule: _EventRule, trigger: date, field: str) -> EventBasedDeadline:
    event_date = require_date(trigger, field)
    with calendar_range(field):
        if rule.unit is DeadlineUnit.BUSINESS_DAYS:
            deadline = add_business_days(event_date, rule.days)
        else:
            deadline = snap_to_previous_business_day(event_date + timedelta(days=rule.days))
    return EventBasedDeadline(
        id=f"{rule.id_prefix}-{event_date.isoformat()}",
        filing_type=rule.filing_type,
        event_type=rule.event_type,
        event_date=event_date,
        deadline=deadline,
        is_business_days=rule.unit is DeadlineUnit.BUSINESS_DAYS,
        days_allowed=rule.days,
        description=rule.description,
    )


def calculate_8k_deadline(event_date: date) -> EventBasedDeadline:
    """Material-event current report: 4 business days after the event."""
    return _apply(MATERIAL_EVENT_RULE, event_date, "event_date")


def calculate_super_8k_deadline(closing_date: date) -> EventBasedDeadline:
    """De-SPAC "super" 8-K: 4 business days after the transaction closes."""
    return _apply(DESPAC_CLOSING_RULE, closing_date, "closing_date")


def calculate_form4_deadline(transaction_date: date) -> EventBasedDeadline:
    """Insider transaction report: 2 business days after the transaction."""
    return _apply(INSIDER_TRANSACTION_RULE, transaction_date, "transaction_date")


def calculate_schedule_13d_deadline(acquisition_date: date) -> EventBasedDeadline:
    """Beneficial-ownership crossing: 10 calendar days, snapped to a business day."""
    return _apply(OWNERSHIP_THRESHOLD_RULE, acquisition_date, "acquisition_date")


__all__ = [
    "calculate_8k_deadline",
    "calculate_form4_deadline",
    "calculate_schedule_13d_deadline",
    "calculate_super_8k_deadline",
]
