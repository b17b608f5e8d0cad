from datetime import date

from spac_compliance.domain.enums.compliance import AlertSeverity, FilerStatus, FilingType
from spac_compliance.domain.services.deadline_alerts import (
    alert_severity,
    build_deadline_alert,
    generate_deadline_alerts,
)
from spac_compliance.domain.services.deadline_calculator import calculate_filing_deadline

EVENT = date(2026, 3, 6)  # 8-K due Mar 12 2026


def _8k(now: date):
    return calculate_filing_deadline(FilingType.FORM_8K, EVENT, now=now)


def test_overdue_alert() -> None:
    alert = build_deadline_alert(_8k(date(2026, 3, 13)), now=date(2026, 3, 13))

    assert alert.severity is AlertSeverity.CRITICAL
    assert alert.title == "OVERDUE: 8-K Filing"
    assert alert.message == "Filing was due Mar 12, 2026. Immediate action required."
    assert alert.id == "alert-8-K-2026-03-12"
    assert alert.created_at == date(2026, 3, 13)


def test_critical_alert() -> None:
    alert = build_deadline_alert(_8k(date(2026, 3, 10)), now=date(2026, 3, 10))
    assert alert.severity is AlertSeverity.CRITICAL
    assert alert.title == "URGENT: 8-K Deadline Approaching"
    assert alert.message == "Filing due in 2 business days (Mar 12, 2026)."


def test_warning_alert() -> None:
    alert = build_deadline_alert(_8k(date(2026, 3, 6)), now=date(2026, 3, 6))
    assert alert.severity is AlertSeverity.WARNING
    assert alert.title == "8-K Deadline Approaching"
    assert alert.business_days_remaining == 4


def test_info_alert() -> None:
    now = date(2026, 1, 15)
    calc = calculate_filing_deadline(
        FilingType.FORM_10K, date(2025, 12, 31), FilerStatus.NON_ACCELERATED, now=now
    )
    alert = build_deadline_alert(calc, now=now)
    assert alert.severity is AlertSeverity.INFO
    assert alert.title == "Upcoming 10-K Filing"
    assert alert.message == "Filing due Mar 31, 2026 (75 days)."


def test_alerts_sorted_by_severity_then_deadline() -> None:
    now = date(2026, 3, 10)
    calcs = [
        calculate_filing_deadline(
            FilingType.FORM_10K, date(2025, 12, 31), FilerStatus.NON_ACCELERATED, now=now
        ),
        calculate_filing_deadline(FilingType.FORM_4, date(2026, 3, 9), now=now),
        _8k(now),
        calculate_filing_deadline(FilingType.FORM_8K, date(2026, 3, 2), now=now),
    ]

    alerts = generate_deadline_alerts(calcs, now=now)

    assert [a.severity for a in alerts] == [
        AlertSeverity.CRITICAL,
        AlertSeverity.CRITICAL,
        AlertSeverity.CRITICAL,
        AlertSeverity.INFO,
    ]
    assert [a.deadline for a in alerts[:3]] == [
        date(2026, 3, 6),
        date(2026, 3, 11),
        date(2026, 3, 12),
    ]
    assert alerts[0].title == "OVERDUE: 8-K Filing"
    assert alerts[1].title == "URGENT: Form 4 Deadline Approaching"


def test_severity_mapping_covers_every_calculation() -> None:
    for now in (date(2026, 1, 2), date(2026, 2, 24), date(2026, 3, 4), date(2026, 3, 11)):
        calc = _8k(now)
        assert alert_severity(calc) in AlertSeverity


def test_no_calculations_no_alerts() -> None:
    assert generate_deadline_alerts([], now=date(2026, 3, 10)) == ()
