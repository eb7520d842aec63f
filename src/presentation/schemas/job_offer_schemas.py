"""Job offer Pydantic schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from domain.entities import JobOffer
from domain.enums import JobOfferStatus
from presentation.schemas.common_schemas import to_naive_utc


class JobOfferCreateRequest(BaseModel):
    """Request schema for creating a draft job offer."""
    
    employer_id: UUID = Field(..., description="Owning employer")
    title: str = Field(..., min_length=1, max_length=100, description="Position title")
    description: str = Field("", max_length=5000, description="Position description")
    application_deadline: datetime = Field(..., description="Last moment to apply")
    required_profession_ids: list[UUID] = Field(
        ...,
        min_length=1,
        description="Professions the offer is open to"
    )
    max_applications: Optional[int] = Field(
        None,
        ge=1,
        le=1000,
        description="Upper bound on applications"
    )
    
    @field_validator("application_deadline")
    @classmethod
    def normalize_deadline(cls, value: datetime) -> datetime:
        return to_naive_utc(value)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "employer_id": "7f0e6d1c-3f5e-4b4a-9a57-2b1f0e8c1d10",
                    "title": "Backend developer",
                    "description": "Python services for the registry",
                    "application_deadline": "2030-01-31T23:59:59Z",
                    "required_profession_ids": ["0b6f0a4e-6c1d-4a3c-8f0b-9d2e1c3b4a5f"],
                    "max_applications": 50
                }
            ]
        }
    }


class JobOfferCloseRequest(BaseModel):
    """Request schema for closing a job offer."""
    
    filled: bool = Field(False, description="Whether the position was filled")


class JobOfferProfessionsRequest(BaseModel):
    """Request schema for replacing the required professions."""
    
    profession_ids: list[UUID] = Field(..., min_length=1, description="New required professions")


class ExtendDeadlineRequest(BaseModel):
    """Request schema for moving the deadline later."""
    
    application_deadline: datetime = Field(..., description="New deadline")
    
    @field_validator("application_deadline")
    @classmethod
    def normalize_deadline(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class JobOfferResponse(BaseModel):
    """Response schema for a job offer with its derived state."""
    
    id: UUID
    employer_id: UUID
    title: str
    description: str
    status: JobOfferStatus
    is_active: bool
    application_deadline: datetime
    required_profession_ids: list[UUID]
    max_applications: int
    view_count: int
    application_count: int
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    is_expired: bool = Field(..., description="Deadline has passed")
    is_accepting_applications: bool = Field(..., description="Professionals may apply now")
    days_until_deadline: int
    
    @classmethod
    def from_entity(cls, offer: JobOffer, now: datetime) -> "JobOfferResponse":
        return cls(
            id=offer.id,
            employer_id=offer.employer_id,
            title=offer.title,
            description=offer.description,
            status=offer.status,
            is_active=offer.is_active,
            application_deadline=offer.application_deadline,
            required_profession_ids=offer.required_profession_ids,
            max_applications=offer.max_applications,
            view_count=offer.view_count,
            application_count=offer.application_count,
            published_at=offer.published_at,
            created_at=offer.created_at,
            updated_at=offer.updated_at,
            is_expired=offer.is_expired(now),
            is_accepting_applications=offer.is_accepting_applications(now),
            days_until_deadline=offer.days_until_deadline(now),
        )
