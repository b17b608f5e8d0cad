# src/spac_compliance/domain/services/filing_rule_catalog.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Filing rule catalog for SEC deadline computation.

Purpose:
    Define the static, read-only rule tables consumed by the deadline
    calculator: one FilingRule per FilingType and one FilerStatusRule per
    FilerStatus.

Layer:
    domain/services

Notes:
    - Pure domain module:
        * No logging.
        * No I/O.
    - Both tables are validated for exhaustiveness over their enumeration at
      import time. A missing entry is a programming error and raises
      RuleCatalogError, so the package refuses to import rather than fall
      back to a default window.
    - Filing types with no statutory window (registration statements, proxy
      materials, Rule 425 communications) carry a zero-day calendar window:
      their deadline is the base date itself, snapped to a business day.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final, TypeVar

from spac_compliance.domain.entities.filing_rules import FilerStatusRule, FilingRule
from spac_compliance.domain.enums.compliance import (
    DeadlineKind,
    DeadlineUnit,
    FilerStatus,
    FilingCategory,
    FilingType,
)
from spac_compliance.domain.exceptions.deadlines import (
    RuleCatalogError,
    UnknownFilerStatusError,
    UnknownFilingTypeError,
)

_E = TypeVar("_E", bound=Enum)

CALENDAR: Final = DeadlineUnit.CALENDAR_DAYS
BUSINESS: Final = DeadlineUnit.BUSINESS_DAYS

# Most conservative classification: shortest 10-K/10-Q windows.
CONSERVATIVE_FILER_STATUS: Final[FilerStatus] = FilerStatus.LARGE_ACCELERATED


def _rule(
    filing_type: FilingType,
    name: str,
    short_name: str,
    category: FilingCategory,
    kind: DeadlineKind,
    unit: DeadlineUnit,
    day_count: int | None,
    description: str,
    *,
    spac: bool,
    despac: bool,
) -> FilingRule:
    return FilingRule(
        filing_type=filing_type,
        name=name,
        short_name=short_name,
        category=category,
        kind=kind,
        unit=unit,
        day_count=day_count,
        description=description,
        required_for_spac=spac,
        required_for_despac=despac,
    )


_FILING_RULES: Final[tuple[FilingRule, ...]] = (
    # ------------------------------------------------------------------ #
    # Periodic reports: window length comes from the filer-status table  #
    # ------------------------------------------------------------------ #
    _rule(
        FilingType.FORM_10K,
        "Annual Report",
        "10-K",
        FilingCategory.PERIODIC,
        DeadlineKind.PERIODIC,
        CALENDAR,
        None,
        "Annual report providing comprehensive overview of business and financial condition",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.FORM_10Q,
        "Quarterly Report",
        "10-Q",
        FilingCategory.PERIODIC,
        DeadlineKind.PERIODIC,
        CALENDAR,
        None,
        "Quarterly report on financial condition and results of operations",
        spac=True,
        despac=True,
    ),
    # ------------------------------------------------------------------ #
    # Current reports                                                    #
    # ------------------------------------------------------------------ #
    _rule(
        FilingType.FORM_8K,
        "Current Report",
        "8-K",
        FilingCategory.CURRENT,
        DeadlineKind.EVENT_BASED,
        BUSINESS,
        4,
        "Report of unscheduled material events or corporate changes",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.SUPER_8K,
        "Super 8-K (De-SPAC)",
        "Super 8-K",
        FilingCategory.CURRENT,
        DeadlineKind.EVENT_BASED,
        BUSINESS,
        4,
        "Enhanced 8-K filed upon completion of de-SPAC transaction with expanded disclosure",
        spac=False,
        despac=True,
    ),
    # ------------------------------------------------------------------ #
    # Registration statements and proxy materials: no statutory window   #
    # ------------------------------------------------------------------ #
    _rule(
        FilingType.S1,
        "Registration Statement",
        "S-1",
        FilingCategory.REGISTRATION,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Registration statement for initial public offering",
        spac=True,
        despac=False,
    ),
    _rule(
        FilingType.S4,
        "Registration Statement (Business Combination)",
        "S-4",
        FilingCategory.REGISTRATION,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Registration statement for securities issued in business combination",
        spac=False,
        despac=True,
    ),
    _rule(
        FilingType.DEF14A,
        "Definitive Proxy Statement",
        "DEF14A",
        FilingCategory.PROXY,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Definitive proxy statement for shareholder meeting",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.PREM14A,
        "Preliminary Proxy Statement",
        "PREM14A",
        FilingCategory.PROXY,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Preliminary proxy statement filed for SEC review before distribution",
        spac=False,
        despac=True,
    ),
    _rule(
        FilingType.DEFA14A,
        "Additional Proxy Soliciting Materials",
        "DEFA14A",
        FilingCategory.PROXY,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Additional definitive proxy soliciting materials",
        spac=False,
        despac=True,
    ),
    _rule(
        FilingType.FORM_425,
        "Prospectus Communications",
        "425",
        FilingCategory.OTHER,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Written communications under Rule 425 related to business combination",
        spac=False,
        despac=True,
    ),
    # ------------------------------------------------------------------ #
    # Beneficial ownership                                               #
    # ------------------------------------------------------------------ #
    _rule(
        FilingType.SC_13D,
        "Schedule 13D",
        "13D",
        FilingCategory.BENEFICIAL,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        10,
        "Beneficial ownership report for holders of more than 5% with activist intent",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.SC_13G,
        "Schedule 13G",
        "13G",
        FilingCategory.BENEFICIAL,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        45,
        "Beneficial ownership report for passive investors owning more than 5%",
        spac=True,
        despac=True,
    ),
    # ------------------------------------------------------------------ #
    # Insider reports                                                    #
    # ------------------------------------------------------------------ #
    _rule(
        FilingType.FORM_3,
        "Initial Statement of Beneficial Ownership",
        "Form 3",
        FilingCategory.INSIDER,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        10,
        "Initial statement of beneficial ownership for insiders",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.FORM_4,
        "Statement of Changes in Beneficial Ownership",
        "Form 4",
        FilingCategory.INSIDER,
        DeadlineKind.EVENT_BASED,
        BUSINESS,
        2,
        "Report changes in beneficial ownership of securities",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.FORM_5,
        "Annual Statement of Changes in Beneficial Ownership",
        "Form 5",
        FilingCategory.INSIDER,
        DeadlineKind.FIXED,
        CALENDAR,
        45,
        "Annual report of insider transactions not previously reported",
        spac=True,
        despac=True,
    ),
    _rule(
        FilingType.OTHER,
        "Other Filing",
        "Other",
        FilingCategory.OTHER,
        DeadlineKind.EVENT_BASED,
        CALENDAR,
        0,
        "Other SEC filing type",
        spac=False,
        despac=False,
    ),
)


_FILER_STATUS_RULES: Final[tuple[FilerStatusRule, ...]] = (
    FilerStatusRule(
        filer_status=FilerStatus.LARGE_ACCELERATED,
        name="Large Accelerated Filer",
        description="Public float of $700 million or more",
        annual_report_days=60,
        quarterly_report_days=40,
    ),
    FilerStatusRule(
        filer_status=FilerStatus.ACCELERATED,
        name="Accelerated Filer",
        description="Public float of $75 million to $700 million",
        annual_report_days=75,
        quarterly_report_days=40,
    ),
    FilerStatusRule(
        filer_status=FilerStatus.NON_ACCELERATED,
        name="Non-Accelerated Filer",
        description="Public float less than $75 million",
        annual_report_days=90,
        quarterly_report_days=45,
        benefits=("Extended filing deadlines",),
    ),
    FilerStatusRule(
        filer_status=FilerStatus.SMALLER_REPORTING,
        name="Smaller Reporting Company",
        description="Public float less than $250 million or revenues less than $100 million",
        annual_report_days=90,
        quarterly_report_days=45,
        benefits=(
            "Scaled disclosure requirements",
            "Two years of audited financials (vs three)",
            "Simplified executive compensation disclosure",
            "No CD&A required",
        ),
    ),
    FilerStatusRule(
        filer_status=FilerStatus.EMERGING_GROWTH,
        name="Emerging Growth Company",
        description="IPO within 5 years with revenues less than $1.235 billion",
        annual_report_days=90,
        quarterly_report_days=45,
        benefits=(
            "Two years of audited financials",
            "Reduced executive compensation disclosure",
            "No auditor attestation on internal controls",
            "Extended transition period for new accounting standards",
            "Confidential SEC submission of draft registration statements",
        ),
    ),
)


def build_exhaustive_table(
    enum_cls: type[_E],
    entries: Iterable[tuple[_E, object]],
    *,
    table: str,
) -> Mapping[_E, object]:
    """Build a read-only mapping that covers every member of ``enum_cls`` exactly once.

    Args:
        enum_cls: Enumeration the table must cover.
        entries: ``(member, value)`` pairs.
        table: Table name used in error details.

    Returns:
        Read-only mapping keyed by enum member.

    Raises:
        RuleCatalogError: On duplicate or missing members.
    """
    mapping: dict[_E, object] = {}
    for key, value in entries:
        if key in mapping:
            raise RuleCatalogError(
                f"duplicate {table} entry for {key!r}",
                details={"table": table, "key": str(key.value)},
            )
        mapping[key] = value

    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise RuleCatalogError(
            f"{table} is missing entries for {', '.join(map(str, missing))}",
            details={"table": table, "missing": missing},
        )
    return MappingProxyType(mapping)


FILING_RULES: Final[Mapping[FilingType, FilingRule]] = build_exhaustive_table(  # type: ignore[assignment]
    FilingType,
    ((r.filing_type, r) for r in _FILING_RULES),
    table="filing rule catalog",
)

FILER_STATUS_RULES: Final[Mapping[FilerStatus, FilerStatusRule]] = build_exhaustive_table(  # type: ignore[assignment]
    FilerStatus,
    ((r.filer_status, r) for r in _FILER_STATUS_RULES),
    table="filer status table",
)


def coerce_filing_type(value: FilingType | str) -> FilingType:
    """Resolve an enum member, member name or SEC form code to a FilingType.

    Raises:
        UnknownFilingTypeError: If ``value`` matches no filing type.
    """
    if isinstance(value, FilingType):
        return value
    if isinstance(value, str):
        if value in FilingType.__members__:
            return FilingType[value]
        try:
            return FilingType(value)
        except ValueError:
            pass
    raise UnknownFilingTypeError(
        f"unrecognized filing type: {value!r}",
        details={"filing_type": repr(value)},
    )


def coerce_filer_status(value: FilerStatus | str) -> FilerStatus:
    """Resolve an enum member or its value to a FilerStatus.

    Raises:
        UnknownFilerStatusError: If ``value`` matches no filer status.
    """
    if isinstance(value, FilerStatus):
        return value
    if isinstance(value, str):
        try:
            return FilerStatus(value.upper())
        except ValueError:
            pass
    raise UnknownFilerStatusError(
        f"unrecognized filer status: {value!r}",
        details={"filer_status": repr(value)},
    )


def get_filing_rule(filing_type: FilingType | str) -> FilingRule:
    """Return the catalog rule for ``filing_type``."""
    ft = coerce_filing_type(filing_type)
    try:
        return FILING_RULES[ft]
    except KeyError as exc:  # pragma: no cover - guarded by import-time validation
        raise UnknownFilingTypeError(f"no rule for filing type {ft.value!r}") from exc


def get_filer_status_rule(filer_status: FilerStatus | str) -> FilerStatusRule:
    """Return the periodic-report windows for ``filer_status``."""
    fs = coerce_filer_status(filer_status)
    try:
        return FILER_STATUS_RULES[fs]
    except KeyError as exc:  # pragma: no cover - guarded by import-time validation
        raise UnknownFilerStatusError(f"no rule for filer status {fs.value!r}") from exc


def is_periodic(filing_type: FilingType | str) -> bool:
    """Whether ``filing_type`` takes its window from the filer-status table."""
    return get_filing_rule(filing_type).uses_filer_status


def filer_deadline_days(
    filing_type: FilingType | str,
    filer_status: FilerStatus | str = CONSERVATIVE_FILER_STATUS,
) -> int:
    """Return the window length for a filing type under a filer status.

    The filer status only matters for annual and quarterly reports; for every
    other type the catalog's fixed count is returned.
    """
    rule = get_filing_rule(filing_type)
    status_rule = get_filer_status_rule(filer_status)
    if rule.day_count is not None:
        return rule.day_count
    if rule.filing_type is FilingType.FORM_10K:
        return status_rule.annual_report_days
    if rule.filing_type is FilingType.FORM_10Q:
        return status_rule.quarterly_report_days
    raise RuleCatalogError(
        f"rule for {rule.filing_type.value!r} takes its window from the filer-status "
        "table, which only covers annual and quarterly reports"
    )


def is_filing_required_for_spac(filing_type: FilingType | str) -> bool:
    """Whether a pre-combination SPAC typically makes this filing."""
    return get_filing_rule(filing_type).required_for_spac


def is_filing_required_for_despac(filing_type: FilingType | str) -> bool:
    """Whether a de-SPAC transaction typically requires this filing."""
    return get_filing_rule(filing_type).required_for_despac


__all__ = [
    "CONSERVATIVE_FILER_STATUS",
    "FILER_STATUS_RULES",
    "FILING_RULES",
    "build_exhaustive_table",
    "coerce_filer_status",
    "coerce_filing_type",
    "filer_deadline_days",
    "get_filer_status_rule",
    "get_filing_rule",
    "is_filing_required_for_despac",
    "is_filing_required_for_spac",
    "is_periodic",
]
