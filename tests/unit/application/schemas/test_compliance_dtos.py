from datetime import date

from spac_compliance.application.schemas.dto.compliance import (
    DeadlineCalculationDTO,
    FederalHolidayDTO,
    PeriodicFilingDTO,
)
from spac_compliance.domain.services.deadline_calculator import calculate_filing_deadline
from spac_compliance.domain.services.holiday_calendar import federal_holiday_calendar
from spac_compliance.domain.services.periodic_schedule import generate_periodic_filing_schedule


def test_calculation_dto_from_entity_dumps_json_friendly_values() -> None:
    calc = calculate_filing_deadline("8-K", date(2026, 3, 6), now=date(2026, 3, 6))

    dumped = DeadlineCalculationDTO.model_validate(calc).model_dump(mode="json")

    assert dumped["filing_type"] == "8-K"
    assert dumped["deadline"] == "2026-03-12"
    assert dumped["urgency"] == "HIGH"
    assert dumped["warning_thresholds"]["critical"] == "2026-03-09"


def test_schedule_dto_carries_period_label() -> None:
    [first, *_] = generate_periodic_filing_schedule(years_ahead=0, now=date(2026, 1, 15))
    dto = PeriodicFilingDTO.model_validate(first)
    assert dto.period.label == "Q1 FY2026"
    assert dto.period.filing_deadline == dto.filing_deadline


def test_holiday_dto_exposes_shift_flag() -> None:
    holidays = [FederalHolidayDTO.model_validate(h) for h in federal_holiday_calendar(2026)]
    shifted = [h.name for h in holidays if h.is_shifted]
    assert shifted == ["Independence Day"]
