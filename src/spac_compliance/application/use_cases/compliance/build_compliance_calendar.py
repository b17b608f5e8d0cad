# src/spac_compliance/application/use_cases/compliance/build_compliance_calendar.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Use case: Build the compliance calendar for one SPAC.

Purpose:
    Given a SPAC profile (IPO date, charter term, fiscal year, filer status,
    pending events and comment letters), compute every deadline the
    compliance team tracks and the alerts derived from them.

Layer:
    application

Notes:
    - Synchronous and side-effect free apart from logging.
    - One ``now`` is resolved per execution and threaded through every
      domain call, so all figures in a response agree with each other.
    - Domain errors propagate unchanged after a ``compliance.calendar.failed``
      log line.
"""

from __future__ import annotations

import logging
from datetime import date

from spac_compliance.application.schemas.dto.compliance import (
    CommentResponseDTO,
    ComplianceCalendarRequestDTO,
    ComplianceCalendarResponseDTO,
    DeadlineAlertDTO,
    DeadlineCalculationDTO,
    PeriodicFilingDTO,
    SPACDeadlinesDTO,
)
from spac_compliance.domain.entities.deadlines import DeadlineCalculation
from spac_compliance.domain.enums.compliance import ScheduleStatus
from spac_compliance.domain.exceptions.base import DomainError
from spac_compliance.domain.services.comment_letters import calculate_comment_response_deadline
from spac_compliance.domain.services.deadline_alerts import generate_deadline_alerts
from spac_compliance.domain.services.deadline_calculator import calculate_filing_deadline
from spac_compliance.domain.services.periodic_schedule import generate_periodic_filing_schedule
from spac_compliance.domain.services.spac_lifecycle import calculate_spac_deadlines

logger = logging.getLogger(__name__)


class BuildComplianceCalendarUseCase:
    """Assemble lifecycle, periodic, event and comment-letter deadlines for a SPAC.

    Returns:
        ComplianceCalendarResponseDTO: The full calendar plus prioritized alerts.

    Raises:
        DomainError: If any input fails domain validation (e.g., a vote date
            before the IPO, an out-of-range fiscal month).
    """

    def execute(
        self,
        req: ComplianceCalendarRequestDTO,
        *,
        now: date | None = None,
    ) -> ComplianceCalendarResponseDTO:
        """Execute the calendar build.

        Args:
            req: SPAC profile and pending obligations.
            now: Reference date. Defaults to today, resolved once.

        Returns:
            A :class:`ComplianceCalendarResponseDTO`.
        """
        as_of = now if now is not None else date.today()

        logger.info(
            "compliance.calendar.start",
            extra={
                "spac_id": req.spac_id,
                "as_of": as_of.isoformat(),
                "filer_status": req.filer_status.value if req.filer_status else None,
                "fy_end_month": req.fy_end_month,
                "events": len(req.events),
                "comment_letters": len(req.comment_letters),
            },
        )

        try:
            response = self._build(req, as_of)
        except DomainError as exc:
            logger.warning(
                "compliance.calendar.failed",
                extra={
                    "spac_id": req.spac_id,
                    "error_code": exc.code,
                    "error": exc.message,
                    "details": exc.details,
                },
            )
            raise

        logger.info(
            "compliance.calendar.success",
            extra={
                "spac_id": req.spac_id,
                "schedule_entries": len(response.schedule),
                "deadlines": len(response.deadlines),
                "comment_responses": len(response.comment_responses),
                "alerts": len(response.alerts),
                "overdue": sum(1 for d in response.deadlines if d.is_overdue),
            },
        )
        return response

    def _build(
        self,
        req: ComplianceCalendarRequestDTO,
        as_of: date,
    ) -> ComplianceCalendarResponseDTO:
        spac = calculate_spac_deadlines(
            req.ipo_date,
            req.term_months,
            req.extension_months,
            req.announced_deal_date,
            req.vote_date,
            now=as_of,
        )

        schedule = generate_periodic_filing_schedule(
            req.fy_end_month,
            req.filer_status,
            req.years_ahead,
            now=as_of,
        )

        calculations: list[DeadlineCalculation] = [
            calculate_filing_deadline(
                entry.filing_type, entry.period_end_date, req.filer_status, now=as_of
            )
            for entry in schedule
            if entry.status is not ScheduleStatus.OVERDUE
        ]
        calculations.extend(
            calculate_filing_deadline(
                event.filing_type, event.trigger_date, req.filer_status, now=as_of
            )
            for event in req.events
        )

        comment_responses = []
        for letter in req.comment_letters:
            days = (
                letter.response_days
                if letter.response_days is not None
                else req.comment_response_days
            )
            result = calculate_comment_response_deadline(letter.received_date, days, now=as_of)
            comment_responses.append(
                CommentResponseDTO.model_validate(result).model_copy(
                    update={"letter_id": letter.letter_id}
                )
            )

        alerts = generate_deadline_alerts(calculations, now=as_of)

        return ComplianceCalendarResponseDTO(
            spac_id=req.spac_id,
            as_of=as_of,
            spac=SPACDeadlinesDTO.model_validate(spac),
            schedule=[PeriodicFilingDTO.model_validate(e) for e in schedule],
            deadlines=[DeadlineCalculationDTO.model_validate(c) for c in calculations],
            comment_responses=comment_responses,
            alerts=[DeadlineAlertDTO.model_validate(a) for a in alerts],
        )
