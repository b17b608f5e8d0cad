# src/spac_compliance/domain/exceptions/base.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for domain/application exceptions so that callers
    (CLI, service layers) can map failures deterministically.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all domain/application exceptions.

    Attributes:
        code:
            Stable error code suitable for mapping to exit codes and logs.
        details:
            Optional machine-readable diagnostic payload used by callers and
            logging code.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        """Initialize a DomainError instance.

        Args:
            message:
                Human-readable error message.
            details:
                Optional structured diagnostic payload for logs.

        """
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        """Return the human-readable message for this error."""
        return self.message
