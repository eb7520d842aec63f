"""Shared Pydantic schemas and helpers."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an incoming timestamp to naive UTC, the storage convention."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class ErrorResponse(BaseModel):
    """Envelope returned for every failed request."""
    
    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Human readable error message")
    errors: list[str] = Field(default_factory=list, description="Error details")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "message": "monthly limit reached",
                    "errors": ["monthly limit reached"]
                }
            ]
        }
    }


class ActivationRequest(BaseModel):
    """Request schema for activating or deactivating a record."""
    
    active: bool = Field(..., description="Target activation state")


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
                    "environment": "production"
                }
            ]
        }
    }
