# src/spac_compliance/domain/services/blackout_periods.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Standard insider-trading blackout windows.

Purpose:
    Reference catalog of the customary blackout windows around quarterly and
    annual earnings and material non-public events.

Layer:
    domain/services

Notes:
    - Descriptive data only. Opening and closing conditions are policy text;
      no window dates are computed here.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from spac_compliance.domain.entities.filing_rules import BlackoutPeriodRule
from spac_compliance.domain.enums.compliance import BlackoutType, InsiderParty
from spac_compliance.domain.exceptions.deadlines import (
    InvalidDeadlineInputError,
    UnknownBlackoutPeriodError,
)

_DIRECTORS_AND_OFFICERS: Final = (InsiderParty.DIRECTORS, InsiderParty.OFFICERS)

_BLACKOUT_PERIODS: Final[tuple[BlackoutPeriodRule, ...]] = (
    BlackoutPeriodRule(
        id="quarterly_close",
        name="Quarterly Close Blackout",
        type=BlackoutType.QUARTERLY_EARNINGS,
        start_rule="2 weeks before quarter end",
        end_rule="2 business days after earnings release",
        default_duration_days=30,
        affected_parties=_DIRECTORS_AND_OFFICERS,
        description="Standard blackout period around quarterly earnings",
    ),
    BlackoutPeriodRule(
        id="annual_close",
        name="Annual Close Blackout",
        type=BlackoutType.ANNUAL_EARNINGS,
        start_rule="2 weeks before fiscal year end",
        end_rule="2 business days after 10-K filing",
        default_duration_days=45,
        affected_parties=_DIRECTORS_AND_OFFICERS,
        description="Extended blackout period around annual earnings",
    ),
    BlackoutPeriodRule(
        id="material_event",
        name="Material Event Blackout",
        type=BlackoutType.MATERIAL_EVENT,
        start_rule="Upon awareness of material non-public information",
        end_rule="2 business days after public disclosure",
        default_duration_days=0,
        affected_parties=(*_DIRECTORS_AND_OFFICERS, InsiderParty.EMPLOYEES),
        description="Blackout triggered by material non-public information",
    ),
)

STANDARD_BLACKOUT_PERIODS: Final[Mapping[str, BlackoutPeriodRule]] = MappingProxyType(
    {p.id: p for p in _BLACKOUT_PERIODS}
)


def get_blackout_period(period_id: str) -> BlackoutPeriodRule:
    """Return the standard blackout window with id ``period_id``.

    Raises:
        UnknownBlackoutPeriodError: If ``period_id`` is not in the catalog.
    """
    key = period_id.strip().lower() if isinstance(period_id, str) else period_id
    try:
        return STANDARD_BLACKOUT_PERIODS[key]
    except (KeyError, TypeError) as exc:
        raise UnknownBlackoutPeriodError(
            f"Unknown blackout period: {period_id!r}",
            details={"id": repr(period_id), "known": sorted(STANDARD_BLACKOUT_PERIODS)},
        ) from exc


def blackout_periods_affecting(party: InsiderParty | str) -> tuple[BlackoutPeriodRule, ...]:
    """Return the standard windows that restrict ``party``, in catalog order.

    Raises:
        InvalidDeadlineInputError: If ``party`` is not an insider group.
    """
    try:
        target = InsiderParty(party.strip().upper())
    except (AttributeError, ValueError) as exc:
        raise InvalidDeadlineInputError(
            f"Unknown insider party: {party!r}",
            details={"field": "party", "value": repr(party)},
        ) from exc
    return tuple(p for p in _BLACKOUT_PERIODS if target in p.affected_parties)


__all__ = ["STANDARD_BLACKOUT_PERIODS", "blackout_periods_affecting", "get_blackout_period"]
