# Copyright (c)
# SPDX-License-Identifier: MIT
"""SPAC compliance CLI: deadline lookups for operators and scripts.

Commands:
    holidays YEAR                     Observed federal holidays for a year.
    deadline FILING_TYPE BASE_DATE    Deadline for one filing obligation.
    schedule                          Periodic 10-K/10-Q calendar.
    spac IPO_DATE                     SPAC liquidation, extension and vote deadlines.
    comment-letter RECEIVED_DATE      SEC comment-letter response deadline.

Every command prints JSON to stdout. Option defaults come from Settings
(DEFAULT_FILER_STATUS, DEFAULT_FY_END_MONTH, SCHEDULE_YEARS_AHEAD,
COMMENT_RESPONSE_DAYS, SPAC_TERM_MONTHS); ``--now`` defaults to today.
A domain error exits with code 2.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any
from uuid import uuid4

import typer
from pydantic import BaseModel

from spac_compliance.application.schemas.dto.compliance import (
    CommentResponseDTO,
    DeadlineCalculationDTO,
    FederalHolidayDTO,
    PeriodicFilingDTO,
    SPACDeadlinesDTO,
)
from spac_compliance.config import get_settings
from spac_compliance.domain.exceptions.base import DomainError
from spac_compliance.domain.services.comment_letters import calculate_comment_response_deadline
from spac_compliance.domain.services.deadline_calculator import calculate_filing_deadline
from spac_compliance.domain.services.holiday_calendar import federal_holiday_calendar
from spac_compliance.domain.services.periodic_schedule import generate_periodic_filing_schedule
from spac_compliance.domain.services.spac_lifecycle import calculate_spac_deadlines
from spac_compliance.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
    set_run_context,
)

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

_DATE_FORMATS = ["%Y-%m-%d"]


@app.callback()
def main() -> None:
    """Compute SEC filing deadlines for SPACs."""
    settings = get_settings()
    configure_root_logging(settings.log_level)
    set_run_context(run_id=uuid4().hex)


def _as_of(now: datetime | None) -> date:
    return now.date() if now is not None else date.today()


def _emit(payload: BaseModel | Iterable[BaseModel]) -> None:
    data: Any
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json")
    else:
        data = [item.model_dump(mode="json") for item in payload]
    typer.echo(json.dumps(data, indent=2))


def _fail(command: str, exc: DomainError) -> typer.Exit:
    log.error(
        "cli.command.failed",
        extra={
            "command": command,
            "error_code": exc.code,
            "error": exc.message,
            "details": exc.details,
        },
    )
    typer.echo(json.dumps({"error": {"code": exc.code, "message": exc.message}}), err=True)
    return typer.Exit(code=2)


@app.command("holidays")
def holidays(
    year: int = typer.Argument(..., help="Calendar year (e.g., 2026)."),  # noqa: B008
) -> None:
    """List the observed federal holidays of YEAR."""
    try:
        calendar = federal_holiday_calendar(year)
    except DomainError as exc:
        raise _fail("holidays", exc) from exc
    _emit(FederalHolidayDTO.model_validate(h) for h in calendar)


@app.command("deadline")
def deadline(
    filing_type: str = typer.Argument(..., help='SEC form code or name (e.g., "8-K", "FORM_10K").'),  # noqa: B008
    base_date: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Triggering date."),  # noqa: B008
    filer_status: str | None = typer.Option(None, help="Filer status (e.g., ACCELERATED)."),  # noqa: B008
    now: datetime | None = typer.Option(None, formats=_DATE_FORMATS, help="Reference date."),  # noqa: B008
) -> None:
    """Compute the deadline for one filing obligation."""
    settings = get_settings()
    status = filer_status or settings.default_filer_status
    try:
        calc = calculate_filing_deadline(filing_type, base_date, status, now=_as_of(now))
    except DomainError as exc:
        raise _fail("deadline", exc) from exc
    log.info(
        "cli.deadline.done",
        extra={"filing_type": calc.filing_type.value, "deadline": calc.deadline},
    )
    _emit(DeadlineCalculationDTO.model_validate(calc))


@app.command("schedule")
def schedule(
    fy_end_month: int | None = typer.Option(None, help="Fiscal-year-end month, 0=Jan..11=Dec."),  # noqa: B008
    filer_status: str | None = typer.Option(None, help="Filer status (e.g., ACCELERATED)."),  # noqa: B008
    years_ahead: int | None = typer.Option(None, help="Fiscal years beyond the current one."),  # noqa: B008
    now: datetime | None = typer.Option(None, formats=_DATE_FORMATS, help="Reference date."),  # noqa: B008
) -> None:
    """Generate the periodic 10-K/10-Q filing calendar."""
    settings = get_settings()
    try:
        entries = generate_periodic_filing_schedule(
            settings.default_fy_end_month if fy_end_month is None else fy_end_month,
            filer_status or settings.default_filer_status,
            settings.schedule_years_ahead if years_ahead is None else years_ahead,
            now=_as_of(now),
        )
    except DomainError as exc:
        raise _fail("schedule", exc) from exc
    log.info("cli.schedule.done", extra={"entries": len(entries)})
    _emit(PeriodicFilingDTO.model_validate(e) for e in entries)


@app.command("spac")
def spac(
    ipo_date: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="IPO closing date."),  # noqa: B008
    term_months: int | None = typer.Option(None, help="Charter term in months."),  # noqa: B008
    extension_months: int = typer.Option(0, help="Extension months already granted."),  # noqa: B008
    vote_date: datetime | None = typer.Option(None, formats=_DATE_FORMATS),  # noqa: B008
    deal_date: datetime | None = typer.Option(None, formats=_DATE_FORMATS),  # noqa: B008
    now: datetime | None = typer.Option(None, formats=_DATE_FORMATS, help="Reference date."),  # noqa: B008
) -> None:
    """Compute SPAC lifecycle deadlines."""
    settings = get_settings()
    try:
        result = calculate_spac_deadlines(
            ipo_date,
            settings.spac_term_months if term_months is None else term_months,
            extension_months,
            deal_date,
            vote_date,
            now=_as_of(now),
        )
    except DomainError as exc:
        raise _fail("spac", exc) from exc
    _emit(SPACDeadlinesDTO.model_validate(result))


@app.command("comment-letter")
def comment_letter(
    received_date: datetime = typer.Argument(..., formats=_DATE_FORMATS, help="Date received."),  # noqa: B008
    response_days: int | None = typer.Option(None, help="Business-day response window."),  # noqa: B008
    now: datetime | None = typer.Option(None, formats=_DATE_FORMATS, help="Reference date."),  # noqa: B008
) -> None:
    """Compute an SEC comment-letter response deadline."""
    settings = get_settings()
    try:
        result = calculate_comment_response_deadline(
            received_date,
            settings.comment_response_days if response_days is None else response_days,
            now=_as_of(now),
        )
    except DomainError as exc:
        raise _fail("comment-letter", exc) from exc
    _emit(CommentResponseDTO.model_validate(result))


if __name__ == "__main__":
    app()
