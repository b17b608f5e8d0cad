# src/spac_compliance/domain/services/spac_lifecycle.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""SPAC lifecycle deadlines.

Purpose:
    Derive the charter and shareholder-vote deadlines that govern a blank-check
    company: liquidation date, extension notice date, proxy filing and
    redemption cut-offs, and the deal-announcement current report.

Layer:
    domain/services

Notes:
    - Charter dates (liquidation, extension) are calendar arithmetic and are
      not snapped; they may land on a weekend.
    - Month addition clamps to month end (Jan 31 + 1 month = Feb 28/29).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Final

from dateutil.relativedelta import relativedelta

from spac_compliance.domain.entities.deadlines import SPACDeadlines
from spac_compliance.domain.exceptions.deadlines import InvalidDeadlineInputError
from spac_compliance.domain.services.business_days import (
    add_business_days,
    subtract_business_days,
)
from spac_compliance.domain.services.input_guards import (
    calendar_range,
    optional_date,
    require_count,
    require_date,
)

DEFAULT_TERM_MONTHS: Final[int] = 24
EXTENSION_NOTICE_DAYS: Final[int] = 30
PROXY_LEAD_BUSINESS_DAYS: Final[int] = 20
REDEMPTION_LEAD_BUSINESS_DAYS: Final[int] = 2
DEAL_ANNOUNCEMENT_BUSINESS_DAYS: Final[int] = 4


def _not_before_ipo(value: date | None, ipo: date, field: str) -> None:
    if value is not None and value < ipo:
        raise InvalidDeadlineInputError(
            f"{field} must not precede ipo_date",
            details={"field": field, "value": value.isoformat(), "ipo_date": ipo.isoformat()},
        )


def liquidation_date(ipo_date: date, term_months: int, extension_months: int = 0) -> date:
    """Return ``ipo_date`` plus the full charter term in calendar months."""
    with calendar_range("ipo_date"):
        return ipo_date + relativedelta(months=term_months + extension_months)


def calculate_spac_deadlines(
    ipo_date: date,
    term_months: int = DEFAULT_TERM_MONTHS,
    extension_months: int = 0,
    announced_deal_date: date | None = None,
    vote_date: date | None = None,
    *,
    now: date,
) -> SPACDeadlines:
    """Compute lifecycle deadlines for a SPAC.

    Args:
        ipo_date: Date the SPAC's IPO closed.
        term_months: Charter term before liquidation (>= 1).
        extension_months: Extensions already granted (>= 0).
        announced_deal_date: Date a definitive agreement was announced, if any.
        vote_date: Scheduled shareholder vote, if any.
        now: Reference date for the liquidation countdown.

    Returns:
        SPACDeadlines. Vote-derived fields are None without ``vote_date``; the
        deal-announcement deadline is None without ``announced_deal_date``.

    Raises:
        InvalidDeadlineInputError: On a missing IPO date, an out-of-range term,
            or a vote/deal date before the IPO.
    """
    ipo = require_date(ipo_date, "ipo_date")
    today = require_date(now, "now")
    term = require_count(term_months, "term_months", minimum=1)
    extension = require_count(extension_months, "extension_months")
    deal = optional_date(announced_deal_date, "announced_deal_date")
    vote = optional_date(vote_date, "vote_date")
    _not_before_ipo(deal, ipo, "announced_deal_date")
    _not_before_ipo(vote, ipo, "vote_date")

    liquidation = liquidation_date(ipo, term, extension)

    proxy_deadline = redemption_deadline = None
    if vote is not None:
        proxy_deadline = subtract_business_days(vote, PROXY_LEAD_BUSINESS_DAYS)
        redemption_deadline = subtract_business_days(vote, REDEMPTION_LEAD_BUSINESS_DAYS)

    deal_filing = None
    if deal is not None:
        deal_filing = add_business_days(deal, DEAL_ANNOUNCEMENT_BUSINESS_DAYS)

    return SPACDeadlines(
        liquidation_deadline=liquidation,
        extension_deadline=liquidation - timedelta(days=EXTENSION_NOTICE_DAYS),
        proxy_filing_deadline=proxy_deadline,
        vote_deadline=vote,
        redemption_deadline=redemption_deadline,
        deal_announcement_filing_deadline=deal_filing,
        days_until_liquidation=(liquidation - today).days,
        is_past_liquidation=liquidation < today,
    )


__all__ = ["DEFAULT_TERM_MONTHS", "calculate_spac_deadlines", "liquidation_date"]
