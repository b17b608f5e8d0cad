# src/spac_compliance/domain/entities/deadlines.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Deadline computation results.

Purpose:
    Immutable value objects produced by the deadline engine: per-obligation
    calculations, periodic calendar entries, event-triggered deadlines,
    alerts, SPAC lifecycle bundles, and comment-letter response deadlines.

Layer:
    domain/entities

Notes:
    - Produced fresh on each call and never mutated.
    - ``days_remaining`` is signed: positive while the deadline is ahead of
      "now", negative once it has passed. ``business_days_remaining`` follows
      the same sign convention.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from spac_compliance.domain.enums.compliance import (
    AlertSeverity,
    FilerStatus,
    FilingType,
    ScheduleStatus,
    UrgencyTier,
)

from .base import BaseEntity
from .calendar import FiscalPeriod


@dataclass(frozen=True, slots=True)
class WarningThresholds(BaseEntity):
    """Dates at which a deadline escalates to each urgency tier.

    Attributes:
        critical: Deadline minus 3 business days.
        high: Deadline minus 7 business days.
        medium: Deadline minus 14 business days.
    """

    critical: date
    high: date
    medium: date

    def __post_init__(self) -> None:
        if not self.medium <= self.high <= self.critical:
            raise ValueError("thresholds must satisfy medium <= high <= critical")


@dataclass(frozen=True, slots=True)
class DeadlineCalculation(BaseEntity):
    """Full deadline computation for one filing obligation.

    Attributes:
        filing_type:
            Filing type the deadline applies to.
        base_date:
            Triggering date (period end or event date).
        deadline:
            Last business day on which the filing is timely.
        is_business_days:
            Whether ``days_allowed`` counts business days.
        days_allowed:
            Length of the filing window in its unit.
        days_remaining:
            Signed calendar days from "now" to the deadline.
        business_days_remaining:
            Signed business days from "now" to the deadline.
        is_overdue:
            True when the deadline is strictly before "now".
        urgency:
            Urgency tier derived from ``warning_thresholds``.
        warning_thresholds:
            Critical/high/medium escalation dates.
        filer_status:
            Filer classification used to resolve the window.
    """

    filing_type: FilingType
    base_date: date
    deadline: date
    is_business_days: bool
    days_allowed: int
    days_remaining: int
    business_days_remaining: int
    is_overdue: bool
    urgency: UrgencyTier
    warning_thresholds: WarningThresholds
    filer_status: FilerStatus

    def __post_init__(self) -> None:
        if self.days_allowed < 0:
            raise ValueError("days_allowed must be >= 0")
        if self.warning_thresholds.critical > self.deadline:
            raise ValueError("critical threshold must not follow the deadline")
        if self.is_overdue and self.urgency is not UrgencyTier.CRITICAL:
            raise ValueError("overdue deadlines must be CRITICAL")


@dataclass(frozen=True, slots=True)
class PeriodicFilingSchedule(BaseEntity):
    """Forward-looking periodic report calendar entry."""

    filing_type: FilingType
    period: FiscalPeriod
    period_end_date: date
    filing_deadline: date
    status: ScheduleStatus

    def __post_init__(self) -> None:
        if self.period_end_date != self.period.end_date:
            raise ValueError("period_end_date must match period.end_date")


@dataclass(frozen=True, slots=True)
class EventBasedDeadline(BaseEntity):
    """Deadline produced by a single episodic trigger.

    Attributes:
        id: Deterministic identifier derived from the rule and event date.
        filing_type: Filing the event obligates.
        event_type: Human-readable trigger label.
        event_date: Date of the triggering event.
        deadline: Computed filing deadline.
        is_business_days: Whether ``days_allowed`` counts business days.
        days_allowed: Window length in its unit.
        description: Rule description suitable for display.
    """

    id: str
    filing_type: FilingType
    event_type: str
    event_date: date
    deadline: date
    is_business_days: bool
    days_allowed: int
    description: str

    def __post_init__(self) -> None:
        if self.deadline < self.event_date:
            raise ValueError("deadline must not precede event_date")


@dataclass(frozen=True, slots=True)
class DeadlineAlert(BaseEntity):
    """Presentation-ready alert derived from a DeadlineCalculation."""

    id: str
    filing_type: FilingType
    title: str
    message: str
    deadline: date
    days_remaining: int
    business_days_remaining: int
    severity: AlertSeverity
    created_at: date


@dataclass(frozen=True, slots=True)
class SPACDeadlines(BaseEntity):
    """Lifecycle deadlines for one SPAC.

    Vote-derived dates are None when no shareholder vote date is known; the
    deal-announcement filing deadline is None without an announced deal.
    """

    liquidation_deadline: date
    extension_deadline: date
    proxy_filing_deadline: date | None
    vote_deadline: date | None
    redemption_deadline: date | None
    deal_announcement_filing_deadline: date | None
    days_until_liquidation: int
    is_past_liquidation: bool

    def __post_init__(self) -> None:
        if self.extension_deadline > self.liquidation_deadline:
            raise ValueError("extension_deadline must not follow liquidation_deadline")


@dataclass(frozen=True, slots=True)
class CommentResponseDeadline(BaseEntity):
    """Response deadline for one SEC comment letter."""

    comment_received_date: date
    response_deadline: date
    response_days: int
    days_remaining: int
    business_days_remaining: int
    is_overdue: bool
    can_request_extension: bool
