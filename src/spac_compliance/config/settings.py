# src/spac_compliance/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""SPAC Compliance Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the deadline engine's outer surfaces
    (CLI and application use case). The domain never reads settings; callers
    pass the resolved values in explicitly.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown env.
    - Explicit field declarations with constrained types and ranges.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spac_compliance.domain.enums.compliance import FilerStatus

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for the compliance deadline engine."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    # ---------------------------
    # Logging
    # ---------------------------
    log_level: str = Field(
        default="INFO",
        description="Root log level (e.g., 'DEBUG', 'INFO').",
        validation_alias="LOG_LEVEL",
    )

    # ---------------------------
    # Deadline defaults
    # ---------------------------
    default_filer_status: FilerStatus = Field(
        default=FilerStatus.LARGE_ACCELERATED,
        description=(
            "Filer classification used when a caller does not supply one. "
            "LARGE_ACCELERATED yields the shortest 10-K/10-Q windows."
        ),
        validation_alias="DEFAULT_FILER_STATUS",
    )
    default_fy_end_month: int = Field(
        default=11,
        ge=0,
        le=11,
        description="Zero-based fiscal-year-end month (0=January, 11=December).",
        validation_alias="DEFAULT_FY_END_MONTH",
    )
    schedule_years_ahead: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Fiscal years beyond the current one covered by periodic schedules.",
        validation_alias="SCHEDULE_YEARS_AHEAD",
    )
    comment_response_days: int = Field(
        default=10,
        ge=1,
        le=60,
        description="Default business-day window for SEC comment-letter responses.",
        validation_alias="COMMENT_RESPONSE_DAYS",
    )
    spac_term_months: int = Field(
        default=24,
        ge=1,
        le=60,
        description="Default SPAC charter term in months before liquidation.",
        validation_alias="SPAC_TERM_MONTHS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Upper-case the level name and reject unknown ones."""
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("default_filer_status", mode="before")
    @classmethod
    def _normalize_filer_status(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.info(
            "Settings initialized",
            extra={
                "environment": settings.environment.value,
                "log_level": settings.log_level,
                "defaults": {
                    "filer_status": settings.default_filer_status.value,
                    "fy_end_month": settings.default_fy_end_month,
                    "years_ahead": settings.schedule_years_ahead,
                    "comment_response_days": settings.comment_response_days,
                    "spac_term_months": settings.spac_term_months,
                },
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
