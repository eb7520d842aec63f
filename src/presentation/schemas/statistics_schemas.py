"""Statistics Pydantic schemas."""

from pydantic import BaseModel, Field


class ApplicationStatsResponse(BaseModel):
    """Counts of non-deleted applications by status."""
    
    total: int
    pending: int
    accepted: int
    rejected: int
    avg_days_to_review: float = Field(..., description="Mean days between applying and review")
    
    model_config = {"from_attributes": True}


class JobOfferStatsResponse(BaseModel):
    """Counts of job offers."""
    
    total: int
    active: int
    published: int
    expired: int
    
    model_config = {"from_attributes": True}
