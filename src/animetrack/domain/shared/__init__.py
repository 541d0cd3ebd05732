"""Shared domain building blocks: error hierarchy and time helpers."""

from animetrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from animetrack.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "BusinessRuleViolation",
    "ConcurrencyError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
