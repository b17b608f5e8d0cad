# src/spac_compliance/domain/exceptions/deadlines.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Deadline engine domain exceptions.

Purpose:
    Provide the narrow error taxonomy of the filing-deadline engine:
    unrecognized enumeration values, invalid inputs, and catalog defects.

Layer:
    domain

Notes:
    - Input errors also derive from ValueError so generic callers that only
      know the standard library can still catch them.
    - None of these are retryable; calculations are deterministic.
"""

from __future__ import annotations

from spac_compliance.domain.exceptions.base import DomainError


class DeadlineError(DomainError):
    """Base class for deadline-engine errors."""

    code = "DEADLINE_ERROR"


class UnknownFilingTypeError(DeadlineError, ValueError):
    """Raised when a filing type is not present in the rule catalog."""

    code = "UNKNOWN_FILING_TYPE"


class UnknownFilerStatusError(DeadlineError, ValueError):
    """Raised when a filer status is not present in the filer-status table."""

    code = "UNKNOWN_FILER_STATUS"


class UnknownCommentLetterTypeError(DeadlineError, ValueError):
    """Raised when a comment-letter category code is not recognized."""

    code = "UNKNOWN_COMMENT_LETTER_TYPE"


class InvalidDeadlineInputError(DeadlineError, ValueError):
    """Raised when a date or numeric input is missing or out of range."""

    code = "INVALID_DEADLINE_INPUT"


class RuleCatalogError(DeadlineError):
    """Raised when a static rule table does not cover its enumeration."""

    code = "RULE_CATALOG_INCOMPLETE"


class UnknownBlackoutPeriodError(DeadlineError, ValueError):
    """Raised when a blackout period id is not in the standard catalog."""

    code = "UNKNOWN_BLACKOUT_PERIOD"
