"""Schemas shared across endpoints."""

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    """Administrator dashboard counters."""

    total: int = Field(..., description="All applications")
    pending: int = Field(..., description="Pending review or under review")
    approved: int
    rejected: int

    model_config = {
        "json_schema_extra": {
            "examples": [{"total": 4, "pending": 2, "approved": 1, "rejected": 1}]
        }
    }


class UploadResponse(BaseModel):
    """Response schema for a stored document."""

    file_url: str = Field(..., description="URL to attach to a document field")


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    error: str
    missing_fields: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "development"
                }
            ]
        }
    }
