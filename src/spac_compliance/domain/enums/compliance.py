# src/spac_compliance/domain/enums/compliance.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
SEC compliance enumerations.

Purpose:
    Provide closed enumerations for SEC filing types, filer classifications,
    and the classifications produced by the deadline engine (units, urgency
    tiers, alert severities, schedule statuses).

Layer:
    domain

Notes:
    - Values are stable tokens safe to persist and to expose in JSON.
    - FilingType values are the SEC form codes as they appear on EDGAR.
"""

from __future__ import annotations

from enum import Enum


class FilingType(str, Enum):
    """SEC filing types tracked for SPAC entities."""

    S1 = "S-1"
    S4 = "S-4"
    DEFA14A = "DEFA14A"
    DEF14A = "DEF 14A"
    PREM14A = "PREM14A"
    FORM_8K = "8-K"
    FORM_10K = "10-K"
    FORM_10Q = "10-Q"
    SUPER_8K = "SUPER 8-K"
    FORM_425 = "425"
    SC_13D = "SC 13D"
    SC_13G = "SC 13G"
    FORM_3 = "3"
    FORM_4 = "4"
    FORM_5 = "5"
    OTHER = "OTHER"


class FilerStatus(str, Enum):
    """SEC filer size/maturity classification.

    Only the annual (10-K) and quarterly (10-Q) report windows depend on it.
    """

    LARGE_ACCELERATED = "LARGE_ACCELERATED"
    ACCELERATED = "ACCELERATED"
    NON_ACCELERATED = "NON_ACCELERATED"
    SMALLER_REPORTING = "SMALLER_REPORTING"
    EMERGING_GROWTH = "EMERGING_GROWTH"


class FilingCategory(str, Enum):
    """Broad grouping of filing types."""

    PERIODIC = "PERIODIC"
    CURRENT = "CURRENT"
    REGISTRATION = "REGISTRATION"
    PROXY = "PROXY"
    BENEFICIAL = "BENEFICIAL"
    INSIDER = "INSIDER"
    OTHER = "OTHER"


class DeadlineKind(str, Enum):
    """How a filing's obligation is triggered."""

    FIXED = "FIXED"
    EVENT_BASED = "EVENT_BASED"
    PERIODIC = "PERIODIC"


class DeadlineUnit(str, Enum):
    """Unit in which a filing window is counted."""

    CALENDAR_DAYS = "CALENDAR_DAYS"
    BUSINESS_DAYS = "BUSINESS_DAYS"


class UrgencyTier(str, Enum):
    """How close a deadline is, relative to its warning thresholds."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class AlertSeverity(str, Enum):
    """Three-tier alert severity derived from urgency."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"


class ScheduleStatus(str, Enum):
    """Status of a periodic filing calendar entry.

    FILED requires an external signal and is never assigned by the engine.
    """

    UPCOMING = "UPCOMING"
    DUE = "DUE"
    FILED = "FILED"
    OVERDUE = "OVERDUE"


class DeadlineStatus(str, Enum):
    """Coarse, display-oriented bucket for a single deadline date."""

    OVERDUE = "OVERDUE"
    DUE_TODAY = "DUE_TODAY"
    DUE_SOON = "DUE_SOON"
    UPCOMING = "UPCOMING"
    FUTURE = "FUTURE"


class FiscalPeriodKind(str, Enum):
    """Whether a fiscal period is a full year or a single quarter."""

    YEAR = "YEAR"
    QUARTER = "QUARTER"


class CommentLetterCategory(str, Enum):
    """Subject-matter grouping of SEC staff comments."""

    ACCOUNTING = "ACCOUNTING"
    LEGAL = "LEGAL"
    BUSINESS = "BUSINESS"
    DISCLOSURE = "DISCLOSURE"
    PROCEDURAL = "PROCEDURAL"


class BlackoutType(str, Enum):
    """What opens an insider-trading blackout window."""

    QUARTERLY_EARNINGS = "QUARTERLY_EARNINGS"
    ANNUAL_EARNINGS = "ANNUAL_EARNINGS"
    MATERIAL_EVENT = "MATERIAL_EVENT"
    CUSTOM = "CUSTOM"


class InsiderParty(str, Enum):
    """Insider groups a blackout window can restrict."""

    DIRECTORS = "DIRECTORS"
    OFFICERS = "OFFICERS"
    EMPLOYEES = "EMPLOYEES"
    TEN_PERCENT_HOLDERS = "TEN_PERCENT_HOLDERS"
