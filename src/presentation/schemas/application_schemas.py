"""Application Pydantic schemas."""

from datetime import datetime
from typing import Any, Literal, Optional
from uuid import UUID
from pydantic import BaseModel, Field, field_validator

from domain.entities import Application
from domain.enums import ApplicationPriority, ApplicationStatus
from domain.value_objects import ExpectedSalary
from presentation.schemas.common_schemas import to_naive_utc


class ExpectedSalarySchema(BaseModel):
    """Salary expectation of an applicant."""
    
    amount: int = Field(..., ge=0, description="Expected amount")
    currency: Literal["CRC", "USD"] = Field("CRC", description="Currency code")
    is_negotiable: bool = Field(True, description="Open to negotiation")
    
    def to_value_object(self) -> ExpectedSalary:
        return ExpectedSalary(
            amount=self.amount,
            currency=self.currency,
            is_negotiable=self.is_negotiable,
        )


class ApplicationContent(BaseModel):
    """Editable content of an application."""
    
    cover_letter: Optional[str] = Field(None, max_length=2000)
    motivation: Optional[str] = Field(None, max_length=1000)
    expected_salary: Optional[ExpectedSalarySchema] = None
    availability_date: Optional[datetime] = None
    additional_skills: Optional[list[str]] = None
    
    @field_validator("availability_date")
    @classmethod
    def normalize_availability(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)
    
    def content_fields(self) -> dict[str, Any]:
        """Fields explicitly sent by the client, converted to domain values."""
        fields = {name: getattr(self, name) for name in self.model_fields_set}
        fields.pop("professional_id", None)
        fields.pop("job_offer_id", None)
        if fields.get("expected_salary") is not None:
            fields["expected_salary"] = fields["expected_salary"].to_value_object()
        if "additional_skills" in fields and fields["additional_skills"] is None:
            fields["additional_skills"] = []
        return fields


class ApplicationCreateRequest(ApplicationContent):
    """Request schema for applying to a job offer."""
    
    professional_id: UUID = Field(..., description="Applicant")
    job_offer_id: UUID = Field(..., description="Target offer")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "professional_id": "5b2f6b0e-2d6c-4a8e-9a1f-3e4d5c6b7a80",
                    "job_offer_id": "9c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e5f",
                    "cover_letter": "I would love to join the team",
                    "expected_salary": {"amount": 1500000, "currency": "CRC"}
                }
            ]
        }
    }


class ApplicationUpdateRequest(ApplicationContent):
    """Request schema for editing a pending application."""


class ReviewRequest(BaseModel):
    """Request schema for reviewing an application."""
    
    status: ApplicationStatus = Field(..., description="Accepted or Rejected")
    notes: Optional[str] = Field(None, max_length=1000)
    reviewer_id: Optional[UUID] = None


class AcceptRequest(BaseModel):
    reviewer_id: Optional[UUID] = None
    notes: Optional[str] = Field(None, max_length=1000)


class RejectRequest(BaseModel):
    reviewer_id: Optional[UUID] = None
    reason: Optional[str] = Field(None, max_length=1000)


class PriorityRequest(BaseModel):
    priority: ApplicationPriority = Field(..., description="Low, Medium or High")


class EligibilityResponse(BaseModel):
    """Outcome of an admission check."""
    
    allowed: bool
    reason: str
    monthly_count: int
    
    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [
                {
                    "allowed": False,
                    "reason": "monthly limit reached",
                    "monthly_count": 3
                }
            ]
        }
    }


class MonthlyCountResponse(BaseModel):
    professional_id: UUID
    monthly_count: int
    monthly_cap: int


class ApplicationResponse(BaseModel):
    """Response schema for an application."""
    
    id: UUID
    professional_id: UUID
    job_offer_id: UUID
    status: ApplicationStatus
    priority: ApplicationPriority
    is_active: bool
    cover_letter: Optional[str] = None
    motivation: Optional[str] = None
    expected_salary: Optional[ExpectedSalarySchema] = None
    availability_date: Optional[datetime] = None
    additional_skills: list[str] = Field(default_factory=list)
    applied_at: datetime
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[UUID] = None
    notes: Optional[str] = None
    updated_at: datetime
    
    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        salary = application.expected_salary
        return cls(
            id=application.id,
            professional_id=application.professional_id,
            job_offer_id=application.job_offer_id,
            status=application.status,
            priority=application.priority,
            is_active=application.is_active,
            cover_letter=application.cover_letter,
            motivation=application.motivation,
            expected_salary=(
                ExpectedSalarySchema(
                    amount=salary.amount,
                    currency=salary.currency,
                    is_negotiable=salary.is_negotiable,
                )
                if salary
                else None
            ),
            availability_date=application.availability_date,
            additional_skills=application.additional_skills,
            applied_at=application.applied_at,
            reviewed_at=application.reviewed_at,
            reviewed_by=application.reviewed_by,
            notes=application.notes,
            updated_at=application.updated_at,
        )
