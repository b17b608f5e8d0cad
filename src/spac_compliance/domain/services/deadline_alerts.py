# src/spac_compliance/domain/services/deadline_alerts.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Deadline alert generation.

Purpose:
    Convert DeadlineCalculations into a prioritized, human-readable alert
    list. Alerts are derived views; the calculation stays authoritative.

Layer:
    domain/services

Notes:
    - No persistence and no de-duplication; both belong to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Final

from spac_compliance.domain.entities.deadlines import DeadlineAlert, DeadlineCalculation
from spac_compliance.domain.enums.compliance import AlertSeverity, UrgencyTier
from spac_compliance.domain.services.deadline_calculator import format_deadline
from spac_compliance.domain.services.filing_rule_catalog import get_filing_rule
from spac_compliance.domain.services.input_guards import require_date

SEVERITY_ORDER: Final[dict[AlertSeverity, int]] = {
    AlertSeverity.CRITICAL: 0,
    AlertSeverity.WARNING: 1,
    AlertSeverity.INFO: 2,
}


def alert_severity(calc: DeadlineCalculation) -> AlertSeverity:
    """Map a calculation's urgency onto the three alert tiers."""
    if calc.is_overdue or calc.urgency is UrgencyTier.CRITICAL:
        return AlertSeverity.CRITICAL
    if calc.urgency is UrgencyTier.HIGH:
        return AlertSeverity.WARNING
    return AlertSeverity.INFO


def build_deadline_alert(calc: DeadlineCalculation, *, now: date) -> DeadlineAlert:
    """Compose the alert for a single calculation."""
    short_name = get_filing_rule(calc.filing_type).short_name
    due = format_deadline(calc.deadline)
    severity = alert_severity(calc)

    if calc.is_overdue:
        title = f"OVERDUE: {short_name} Filing"
        message = f"Filing was due {due}. Immediate action required."
    elif severity is AlertSeverity.CRITICAL:
        title = f"URGENT: {short_name} Deadline Approaching"
        message = f"Filing due in {calc.business_days_remaining} business days ({due})."
    elif severity is AlertSeverity.WARNING:
        title = f"{short_name} Deadline Approaching"
        message = f"Filing due in {calc.business_days_remaining} business days ({due})."
    else:
        title = f"Upcoming {short_name} Filing"
        message = f"Filing due {due} ({calc.days_remaining} days)."

    return DeadlineAlert(
        id=f"alert-{calc.filing_type.value}-{calc.deadline.isoformat()}",
        filing_type=calc.filing_type,
        title=title,
        message=message,
        deadline=calc.deadline,
        days_remaining=calc.days_remaining,
        business_days_remaining=calc.business_days_remaining,
        severity=severity,
        created_at=now,
    )


def generate_deadline_alerts(
    calculations: Iterable[DeadlineCalculation],
    *,
    now: date,
) -> tuple[DeadlineAlert, ...]:
    """Build alerts for ``calculations`` ordered by severity, then deadline.

    Args:
        calculations: Deadline calculations, typically all computed with the same ``now``.
        now: Alert creation date.

    Returns:
        Alerts sorted CRITICAL, WARNING, INFO; earliest deadline first within a tier.
    """
    today = require_date(now, "now")
    alerts = [build_deadline_alert(calc, now=today) for calc in calculations]
    alerts.sort(key=lambda a: (SEVERITY_ORDER[a.severity], a.deadline))
    return tuple(alerts)


__all__ = ["alert_severity", "build_deadline_alert", "generate_deadline_alerts"]
