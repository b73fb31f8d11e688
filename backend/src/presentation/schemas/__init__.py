"""Pydantic schemas for request/response validation."""

from .application_schemas import (
    ApplicationCreateRequest,
    ApplicationUpdateRequest,
    ApplicationSubmitRequest,
    ApplicationResponse,
    ReviewActionRequest,
    SubmissionCheckResponse,
)
from .common_schemas import (
    StatsResponse,
    UploadResponse,
    DeleteResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ApplicationCreateRequest",
    "ApplicationUpdateRequest",
    "ApplicationSubmitRequest",
    "ApplicationResponse",
    "ReviewActionRequest",
    "SubmissionCheckResponse",
    "StatsResponse",
    "UploadResponse",
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
]
