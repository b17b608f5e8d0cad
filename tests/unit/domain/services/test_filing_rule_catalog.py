from enum import Enum

import pytest

from spac_compliance.domain.enums.compliance import (
    DeadlineKind,
    DeadlineUnit,
    FilerStatus,
    FilingType,
)
from spac_compliance.domain.exceptions.deadlines import (
    RuleCatalogError,
    UnknownFilerStatusError,
    UnknownFilingTypeError,
)
from spac_compliance.domain.services.filing_rule_catalog import (
    CONSERVATIVE_FILER_STATUS,
    FILER_STATUS_RULES,
    FILING_RULES,
    build_exhaustive_table,
    coerce_filer_status,
    coerce_filing_type,
    filer_deadline_days,
    get_filing_rule,
    is_filing_required_for_despac,
    is_filing_required_for_spac,
    is_periodic,
)


def test_catalog_covers_every_enum_member() -> None:
    assert set(FILING_RULES) == set(FilingType)
    assert set(FILER_STATUS_RULES) == set(FilerStatus)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        FILING_RULES[FilingType.OTHER] = FILING_RULES[FilingType.S1]  # type: ignore[index]


@pytest.mark.parametrize(
    ("status", "annual", "quarterly"),
    [
        (FilerStatus.LARGE_ACCELERATED, 60, 40),
        (FilerStatus.ACCELERATED, 75, 40),
        (FilerStatus.NON_ACCELERATED, 90, 45),
        (FilerStatus.SMALLER_REPORTING, 90, 45),
        (FilerStatus.EMERGING_GROWTH, 90, 45),
    ],
)
def test_periodic_windows_by_filer_status(status: FilerStatus, annual: int, quarterly: int) -> None:
    assert filer_deadline_days(FilingType.FORM_10K, status) == annual
    assert filer_deadline_days(FilingType.FORM_10Q, status) == quarterly


def test_conservative_status_has_shortest_windows() -> None:
    conservative = FILER_STATUS_RULES[CONSERVATIVE_FILER_STATUS]
    for rule in FILER_STATUS_RULES.values():
        assert conservative.annual_report_days <= rule.annual_report_days
        assert conservative.quarterly_report_days <= rule.quarterly_report_days


@pytest.mark.parametrize(
    ("filing_type", "unit", "days"),
    [
        (FilingType.FORM_8K, DeadlineUnit.BUSINESS_DAYS, 4),
        (FilingType.SUPER_8K, DeadlineUnit.BUSINESS_DAYS, 4),
        (FilingType.FORM_4, DeadlineUnit.BUSINESS_DAYS, 2),
        (FilingType.FORM_3, DeadlineUnit.CALENDAR_DAYS, 10),
        (FilingType.SC_13D, DeadlineUnit.CALENDAR_DAYS, 10),
        (FilingType.SC_13G, DeadlineUnit.CALENDAR_DAYS, 45),
        (FilingType.FORM_5, DeadlineUnit.CALENDAR_DAYS, 45),
        (FilingType.S1, DeadlineUnit.CALENDAR_DAYS, 0),
        (FilingType.FORM_425, DeadlineUnit.CALENDAR_DAYS, 0),
    ],
)
def test_fixed_windows_ignore_filer_status(
    filing_type: FilingType, unit: DeadlineUnit, days: int
) -> None:
    rule = get_filing_rule(filing_type)
    assert rule.unit is unit
    for status in FilerStatus:
        assert filer_deadline_days(filing_type, status) == days


def test_only_annual_and_quarterly_reports_are_periodic() -> None:
    periodic = {ft for ft in FilingType if is_periodic(ft)}
    assert periodic == {FilingType.FORM_10K, FilingType.FORM_10Q}
    assert get_filing_rule("10-K").kind is DeadlineKind.PERIODIC


def test_filer_status_only_drives_rules_that_defer_to_it() -> None:
    for filing_type, rule in FILING_RULES.items():
        windows = {filer_deadline_days(filing_type, status) for status in FilerStatus}
        if rule.uses_filer_status:
            assert len(windows) > 1
        else:
            assert windows == {rule.day_count}

def test_coerce_filing_type_accepts_value_or_name() -> None:
    assert coerce_filing_type("8-K") is FilingType.FORM_8K
    assert coerce_filing_type("FORM_8K") is FilingType.FORM_8K
    assert coerce_filing_type("DEF 14A") is FilingType.DEF14A
    assert coerce_filing_type(FilingType.SC_13D) is FilingType.SC_13D


def test_unknown_filing_type() -> None:
    with pytest.raises(UnknownFilingTypeError) as excinfo:
        get_filing_rule("10-X")
    assert excinfo.value.code == "UNKNOWN_FILING_TYPE"
    assert isinstance(excinfo.value, ValueError)


def test_coerce_filer_status_is_case_insensitive() -> None:
    assert coerce_filer_status("accelerated") is FilerStatus.ACCELERATED
    with pytest.raises(UnknownFilerStatusError):
        coerce_filer_status("MEGA_CAP")


def test_spac_and_despac_requirements() -> None:
    assert is_filing_required_for_spac(FilingType.FORM_10K)
    assert not is_filing_required_for_spac(FilingType.SUPER_8K)
    assert is_filing_required_for_despac(FilingType.SUPER_8K)
    assert is_filing_required_for_despac(FilingType.S4)
    assert not is_filing_required_for_despac(FilingType.S1)


class _Color(Enum):
    RED = "red"
    BLUE = "blue"


def test_build_exhaustive_table_rejects_missing_entry() -> None:
    with pytest.raises(RuleCatalogError) as excinfo:
        build_exhaustive_table(_Color, [(_Color.RED, 1)], table="colors")
    assert excinfo.value.details["missing"] == ["blue"]


def test_build_exhaustive_table_rejects_duplicates() -> None:
    with pytest.raises(RuleCatalogError):
        build_exhaustive_table(
            _Color,
            [(_Color.RED, 1), (_Color.BLUE, 2), (_Color.RED, 3)],
            table="colors",
        )
