"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input could not be turned into a valid domain value."""


class RejectionReason(Enum):
    """Closed set of causes for refusing a purchase."""

    INVALID_ACCOUNT = "invalid account identifier"
    TOO_MANY_TICKETS = "exceeds maximum ticket count"
    ADULT_REQUIRED = "child or infant tickets require an adult"


class InvalidPurchaseError(ValidationError):
    """A purchase request broke a business rule.

    Exactly one ``reason`` is reported per rejected request: the first
    rule that failed.
    """

    def __init__(self, reason: RejectionReason, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = f"Invalid purchase: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
