# src/spac_compliance/domain/services/input_guards.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Boundary guards for deadline-engine inputs.

Every public calculator runs its arguments through these helpers before any
arithmetic happens. A missing date is never replaced by "today" or the epoch.

Layer:
    domain/services
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any

from spac_compliance.domain.exceptions.deadlines import DeadlineError, InvalidDeadlineInputError

MIN_FY_END_MONTH = 0
MAX_FY_END_MONTH = 11


def require_date(value: Any, field: str) -> date:
    """Return ``value`` as a plain ``date``.

    Args:
        value: Candidate date. A ``datetime`` is narrowed to its date part.
        field: Argument name used in the error message.

    Returns:
        The validated date.

    Raises:
        InvalidDeadlineInputError: If ``value`` is None or not a date.
    """
    if value is None:
        raise InvalidDeadlineInputError(
            f"{field} is required",
            details={"field": field},
        )
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidDeadlineInputError(
            f"{field} must be a date",
            details={"field": field, "type": type(value).__name__},
        )
    return value


def optional_date(value: Any, field: str) -> date | None:
    """Like :func:`require_date` but lets ``None`` through."""
    if value is None:
        return None
    return require_date(value, field)


def require_count(value: Any, field: str, *, minimum: int = 0) -> int:
    """Validate an integer day/month count.

    Raises:
        InvalidDeadlineInputError: If ``value`` is not an int or is below ``minimum``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDeadlineInputError(
            f"{field} must be an integer",
            details={"field": field, "value": repr(value)},
        )
    if value < minimum:
        raise InvalidDeadlineInputError(
            f"{field} must be >= {minimum}",
            details={"field": field, "value": value},
        )
    return value


def require_fy_end_month(value: Any) -> int:
    """Validate a zero-based fiscal-year-end month (0=January .. 11=December)."""
    month = require_count(value, "fy_end_month", minimum=MIN_FY_END_MONTH)
    if month > MAX_FY_END_MONTH:
        raise InvalidDeadlineInputError(
            "fy_end_month must be between 0 and 11",
            details={"field": "fy_end_month", "value": month},
        )
    return month


@contextmanager
def calendar_range(field: str) -> Iterator[None]:
    """Reject date arithmetic that leaves the supported calendar (years 1..9999).

    ``OverflowError`` from ``date`` +/- ``timedelta`` and the ``ValueError``
    raised when ``relativedelta`` lands on year 10000 surface as
    :class:`InvalidDeadlineInputError`. Domain errors pass through unchanged.
    """
    try:
        yield
    except DeadlineError:
        raise
    except (OverflowError, ValueError) as exc:
        raise InvalidDeadlineInputError(
            f"{field} falls outside the supported calendar",
            details={"field": field, "error": str(exc)},
        ) from exc


__all__ = [
    "MAX_FY_END_MONTH",
    "MIN_FY_END_MONTH",
    "calendar_range",
    "optional_date",
    "require_count",
    "require_date",
    "require_fy_end_month",
]
