# src/spac_compliance/domain/services/comment_letters.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""SEC comment-letter response deadlines.

Purpose:
    Compute when a response to an SEC staff comment letter is due and whether
    there is still room to ask the staff for more time.

Layer:
    domain/services
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType
from typing import Final

from spac_compliance.domain.entities.deadlines import CommentResponseDeadline
from spac_compliance.domain.entities.filing_rules import CommentLetterType
from spac_compliance.domain.enums.compliance import CommentLetterCategory
from spac_compliance.domain.exceptions.deadlines import UnknownCommentLetterTypeError
from spac_compliance.domain.services.business_days import add_business_days, count_business_days
from spac_compliance.domain.services.input_guards import require_count, require_date

DEFAULT_RESPONSE_BUSINESS_DAYS: Final[int] = 10
MIN_EXTENSION_LEAD_BUSINESS_DAYS: Final[int] = 2


def _letter(
    code: str,
    name: str,
    description: str,
    category: CommentLetterCategory,
    typical_response_days: int = DEFAULT_RESPONSE_BUSINESS_DAYS,
) -> tuple[str, CommentLetterType]:
    return code, CommentLetterType(
        code=code,
        name=name,
        description=description,
        typical_response_days=typical_response_days,
        category=category,
    )


COMMENT_LETTER_TYPES: Final[Mapping[str, CommentLetterType]] = MappingProxyType(
    dict(
        (
            _letter(
                "ACC",
                "Accounting",
                "Questions about accounting treatment or GAAP compliance",
                CommentLetterCategory.ACCOUNTING,
            ),
            _letter(
                "FIN",
                "Financial Statements",
                "Questions about financial statement presentation",
                CommentLetterCategory.ACCOUNTING,
            ),
            _letter(
                "MDA",
                "MD&A",
                "Questions about management discussion and analysis",
                CommentLetterCategory.DISCLOSURE,
            ),
            _letter(
                "RSK",
                "Risk Factors",
                "Questions about risk factor disclosure",
                CommentLetterCategory.DISCLOSURE,
            ),
            _letter(
                "LEG",
                "Legal",
                "Questions about legal proceedings or legal disclosure",
                CommentLetterCategory.LEGAL,
            ),
            _letter(
                "BUS",
                "Business",
                "Questions about business description",
                CommentLetterCategory.BUSINESS,
            ),
            _letter(
                "GOV",
                "Corporate Governance",
                "Questions about corporate governance disclosure",
                CommentLetterCategory.DISCLOSURE,
            ),
            _letter(
                "COM",
                "Compensation",
                "Questions about executive compensation disclosure",
                CommentLetterCategory.DISCLOSURE,
            ),
            _letter(
                "PRO",
                "Procedural",
                "Procedural or administrative matters",
                CommentLetterCategory.PROCEDURAL,
                typical_response_days=5,
            ),
        )
    )
)


def response_days_for(code: str) -> int:
    """Return the customary response window for a comment category code.

    Raises:
        UnknownCommentLetterTypeError: If ``code`` is not a known category.
    """
    key = code.strip().upper() if isinstance(code, str) else code
    try:
        return COMMENT_LETTER_TYPES[key].typical_response_days
    except (KeyError, TypeError) as exc:
        raise UnknownCommentLetterTypeError(
            f"Unknown comment letter type: {code!r}",
            details={"code": repr(code), "known": sorted(COMMENT_LETTER_TYPES)},
        ) from exc


def calculate_comment_response_deadline(
    received_date: date,
    response_days: int = DEFAULT_RESPONSE_BUSINESS_DAYS,
    *,
    now: date,
) -> CommentResponseDeadline:
    """Compute the response deadline for a comment letter.

    An extension can still be requested while at least two business days remain.

    Raises:
        InvalidDeadlineInputError: On a missing date or ``response_days < 1``.
    """
    received = require_date(received_date, "received_date")
    today = require_date(now, "now")
    days = require_count(response_days, "response_days", minimum=1)

    deadline = add_business_days(received, days)
    remaining = count_business_days(today, deadline)
    return CommentResponseDeadline(
        comment_received_date=received,
        response_deadline=deadline,
        response_days=days,
        days_remaining=(deadline - today).days,
        business_days_remaining=remaining,
        is_overdue=deadline < today,
        can_request_extension=remaining >= MIN_EXTENSION_LEAD_BUSINESS_DAYS,
    )


__all__ = [
    "COMMENT_LETTER_TYPES",
    "DEFAULT_RESPONSE_BUSINESS_DAYS",
    "calculate_comment_response_deadline",
    "response_days_for",
]
