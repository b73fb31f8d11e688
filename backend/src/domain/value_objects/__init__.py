"""Domain Value Objects - Immutable objects without identity."""

from .application_code import ApplicationCode, FALLBACK_PREFIX
from .application_stats import ApplicationStats, PENDING_STATUSES
from .field_set import FieldSet, field_set_for, is_blank

__all__ = [
    "ApplicationCode",
    "FALLBACK_PREFIX",
    "ApplicationStats",
    "PENDING_STATUSES",
    "FieldSet",
    "field_set_for",
    "is_blank",
]
