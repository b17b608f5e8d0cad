# src/spac_compliance/domain/entities/filing_rules.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Filing rule definitions.

Purpose:
    Declarative records backing the static rule tables: one FilingRule per
    filing type, one FilerStatusRule per filer classification, and one
    CommentLetterType per SEC staff comment category.

Layer:
    domain/entities

Notes:
    - These are data, not logic. Calculators read them; nothing mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass

from spac_compliance.domain.enums.compliance import (
    BlackoutType,
    CommentLetterCategory,
    DeadlineKind,
    DeadlineUnit,
    FilerStatus,
    FilingCategory,
    FilingType,
    InsiderParty,
)

from .base import BaseEntity


@dataclass(frozen=True, slots=True)
class FilingRule(BaseEntity):
    """Deadline rule for a single filing type.

    Attributes:
        filing_type:
            Filing type this rule governs.
        name:
            Full display name (e.g., "Annual Report").
        short_name:
            Compact display name used in alert titles (e.g., "10-K").
        category:
            Broad filing category.
        kind:
            Whether the obligation is periodic, event-based or fixed.
        unit:
            Calendar days or business days.
        day_count:
            Fixed window length. ``None`` means the window comes from the
            filer-status table (annual and quarterly reports only).
        description:
            One-line description of the filing.
        required_for_spac:
            Whether a pre-combination SPAC typically files it.
        required_for_despac:
            Whether a de-SPAC transaction typically requires it.
    """

    filing_type: FilingType
    name: str
    short_name: str
    category: FilingCategory
    kind: DeadlineKind
    unit: DeadlineUnit
    day_count: int | None
    description: str
    required_for_spac: bool
    required_for_despac: bool

    def __post_init__(self) -> None:
        if self.day_count is not None and self.day_count < 0:
            raise ValueError("day_count must be >= 0 when provided")
        if self.day_count is None and self.kind is not DeadlineKind.PERIODIC:
            raise ValueError("only periodic rules may defer day_count to filer status")

    @property
    def uses_filer_status(self) -> bool:
        """Whether the window length is taken from the filer-status table."""
        return self.day_count is None


@dataclass(frozen=True, slots=True)
class FilerStatusRule(BaseEntity):
    """Periodic-report windows for a filer classification.

    Attributes:
        filer_status: Classification this rule describes.
        name: Display name.
        description: Threshold description (public float / revenue).
        annual_report_days: Calendar days after fiscal year end for the 10-K.
        quarterly_report_days: Calendar days after quarter end for the 10-Q.
        benefits: Scaled-disclosure accommodations, if any.
    """

    filer_status: FilerStatus
    name: str
    description: str
    annual_report_days: int
    quarterly_report_days: int
    benefits: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.annual_report_days <= 0 or self.quarterly_report_days <= 0:
            raise ValueError("report windows must be positive")


@dataclass(frozen=True, slots=True)
class CommentLetterType(BaseEntity):
    """SEC staff comment category and its customary response window."""

    code: str
    name: str
    description: str
    typical_response_days: int
    category: CommentLetterCategory


@dataclass(frozen=True, slots=True)
class BlackoutPeriodRule(BaseEntity):
    """Standard insider-trading blackout window.

    Attributes:
        id: Stable slug (e.g., ``"quarterly_close"``).
        name: Display name.
        type: What opens the window.
        start_rule: Human-readable opening condition.
        end_rule: Human-readable closing condition.
        default_duration_days: Typical length in calendar days; 0 when the
            window is open-ended until disclosure.
        affected_parties: Insider groups restricted while the window is open.
        description: Short explanation.
    """

    id: str
    name: str
    type: BlackoutType
    start_rule: str
    end_rule: str
    default_duration_days: int
    affected_parties: tuple[InsiderParty, ...]
    description: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("blackout period id must be non-empty")
        if self.default_duration_days < 0:
            raise ValueError("default_duration_days must be >= 0")
        if not self.affected_parties:
            raise ValueError("a blackout period must restrict at least one party")
