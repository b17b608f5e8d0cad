# src/spac_compliance/application/schemas/dto/compliance.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application DTOs for the SPAC compliance calendar.

Synopsis:
    Strict (Pydantic v2) DTOs used by the calendar use case and the CLI.
    Request DTOs carry caller input; response DTOs mirror the frozen domain
    entities one-to-one and are built with ``model_validate(entity)``.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from spac_compliance.application.schemas.dto.base import BaseDTO
from spac_compliance.domain.enums.compliance import (
    AlertSeverity,
    FilerStatus,
    FilingType,
    FiscalPeriodKind,
    ScheduleStatus,
    UrgencyTier,
)

# --------------------------------------------------------------------------- #
# Request                                                                     #
# --------------------------------------------------------------------------- #


class FilingEventDTO(BaseDTO):
    """A triggering event that starts a filing clock.

    Attributes:
        filing_type: Filing the event obliges (e.g., "8-K", "4").
        trigger_date: Date of the event.
    """

    filing_type: FilingType
    trigger_date: date


class CommentLetterDTO(BaseDTO):
    """An SEC comment letter awaiting a response.

    Attributes:
        letter_id: Caller-side identifier echoed back in the response.
        received_date: Date the letter was received.
        response_days: Business-day window; None uses the configured default.
    """

    letter_id: str = Field(min_length=1)
    received_date: date
    response_days: int | None = None


class ComplianceCalendarRequestDTO(BaseDTO):
    """Input profile for building one SPAC's compliance calendar."""

    spac_id: str = Field(min_length=1)
    ipo_date: date
    term_months: int = 24
    extension_months: int = 0
    announced_deal_date: date | None = None
    vote_date: date | None = None
    fy_end_month: int = 11
    filer_status: FilerStatus | None = None
    years_ahead: int = 2
    comment_response_days: int = 10
    events: list[FilingEventDTO] = Field(default_factory=list)
    comment_letters: list[CommentLetterDTO] = Field(default_factory=list)


# --------------------------------------------------------------------------- #
# Response                                                                    #
# --------------------------------------------------------------------------- #


class FederalHolidayDTO(BaseDTO):
    """One federal holiday and the weekday it is observed on."""

    name: str
    year: int
    actual_date: date
    observed_date: date
    is_shifted: bool


class WarningThresholdsDTO(BaseDTO):
    critical: date
    high: date
    medium: date


class DeadlineCalculationDTO(BaseDTO):
    """Deadline for one filing obligation as of the calendar's ``as_of`` date."""

    filing_type: FilingType
    base_date: date
    deadline: date
    is_business_days: bool
    days_allowed: int
    days_remaining: int
    business_days_remaining: int
    is_overdue: bool
    urgency: UrgencyTier
    warning_thresholds: WarningThresholdsDTO
    filer_status: FilerStatus


class FiscalPeriodDTO(BaseDTO):
    kind: FiscalPeriodKind
    fiscal_year: int
    quarter: int | None
    start_date: date
    end_date: date
    filing_deadline: date | None
    label: str


class PeriodicFilingDTO(BaseDTO):
    """One 10-K or 10-Q entry of the periodic schedule."""

    filing_type: FilingType
    period: FiscalPeriodDTO
    period_end_date: date
    filing_deadline: date
    status: ScheduleStatus


class SPACDeadlinesDTO(BaseDTO):
    """SPAC charter and shareholder-vote deadlines."""

    liquidation_deadline: date
    extension_deadline: date
    proxy_filing_deadline: date | None
    vote_deadline: date | None
    redemption_deadline: date | None
    deal_announcement_filing_deadline: date | None
    days_until_liquidation: int
    is_past_liquidation: bool


class CommentResponseDTO(BaseDTO):
    """Response deadline for one comment letter.

    ``letter_id`` is None when the deadline was computed outside a calendar build.
    """

    letter_id: str | None = None
    comment_received_date: date
    response_deadline: date
    response_days: int
    days_remaining: int
    business_days_remaining: int
    is_overdue: bool
    can_request_extension: bool


class DeadlineAlertDTO(BaseDTO):
    id: str
    filing_type: FilingType
    title: str
    message: str
    deadline: date
    days_remaining: int
    business_days_remaining: int
    severity: AlertSeverity
    created_at: date


class ComplianceCalendarResponseDTO(BaseDTO):
    """Everything a compliance dashboard needs for one SPAC.

    Attributes:
        spac_id: Echo of the request identifier.
        as_of: The single ``now`` every figure was computed against.
        spac: Charter and vote deadlines.
        schedule: Periodic 10-K/10-Q calendar, ascending by deadline.
        deadlines: Calculations for open schedule entries and events.
        comment_responses: One entry per comment letter, in request order.
        alerts: Prioritized alerts over ``deadlines``.
    """

    spac_id: str
    as_of: date
    spac: SPACDeadlinesDTO
    schedule: list[PeriodicFilingDTO]
    deadlines: list[DeadlineCalculationDTO]
    comment_responses: list[CommentResponseDTO]
    alerts: list[DeadlineAlertDTO]


__all__ = [
    "CommentLetterDTO",
    "CommentResponseDTO",
    "ComplianceCalendarRequestDTO",
    "ComplianceCalendarResponseDTO",
    "DeadlineAlertDTO",
    "DeadlineCalculationDTO",
    "FederalHolidayDTO",
    "FilingEventDTO",
    "FiscalPeriodDTO",
    "PeriodicFilingDTO",
    "SPACDeadlinesDTO",
    "WarningThresholdsDTO",
]
