# src/spac_compliance/domain/entities/calendar.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Calendar value objects.

Purpose:
    Immutable representations of observed federal holidays and fiscal periods.
    Purely derived from a year (and fiscal-year-end month); no stored identity.

Layer: domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from spac_compliance.domain.enums.compliance import FiscalPeriodKind

from .base import BaseEntity


@dataclass(frozen=True, slots=True)
class FederalHoliday(BaseEntity):
    """A US federal holiday and the weekday on which it is observed.

    Args:
        name: Display name (e.g., "Independence Day").
        year: Calendar year the holiday belongs to.
        actual_date: Date the holiday falls on by rule.
        observed_date: Weekday on which it is observed.
    """

    name: str
    year: int
    actual_date: date
    observed_date: date

    @property
    def is_shifted(self) -> bool:
        """Whether weekend observance moved the holiday."""
        return self.actual_date != self.observed_date


@dataclass(frozen=True, slots=True)
class FiscalQuarterRef(BaseEntity):
    """Which fiscal quarter of which fiscal year a date falls within."""

    quarter: int
    fiscal_year: int

    def __post_init__(self) -> None:
        if not 1 <= self.quarter <= 4:
            raise ValueError("quarter must be between 1 and 4")


@dataclass(frozen=True, slots=True)
class FiscalPeriod(BaseEntity):
    """A fiscal year or fiscal quarter.

    Args:
        kind: YEAR or QUARTER.
        fiscal_year: Fiscal year label (calendar year in which the year ends).
        quarter: Quarter number for QUARTER periods; None for YEAR periods.
        start_date: First day of the period.
        end_date: Last day of the period.
        filing_deadline: Associated report deadline, when one applies.

    Raises:
        ValueError: If quarter and kind disagree or the dates are inverted.
    """

    kind: FiscalPeriodKind
    fiscal_year: int
    quarter: int | None
    start_date: date
    end_date: date
    filing_deadline: date | None = None

    def __post_init__(self) -> None:
        if self.kind is FiscalPeriodKind.QUARTER:
            if self.quarter is None or not 1 <= self.quarter <= 4:
                raise ValueError("quarter periods require a quarter between 1 and 4")
        elif self.quarter is not None:
            raise ValueError("year periods must not carry a quarter")
        if self.start_date > self.end_date:
            raise ValueError("start_date must be <= end_date")
        if self.filing_deadline is not None and self.filing_deadline < self.end_date:
            raise ValueError("filing_deadline must not precede end_date")

    @property
    def label(self) -> str:
        """Short label such as ``FY2025`` or ``Q2 FY2025``."""
        if self.quarter is None:
            return f"FY{self.fiscal_year}"
        return f"Q{self.quarter} FY{self.fiscal_year}"
