"""Profession, professional and curriculum Pydantic schemas."""

from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, Field

from domain.enums import ProficiencyLevel


class ProfessionResponse(BaseModel):
    """Response schema for a catalog profession with its demand counters."""
    
    id: UUID
    name: str
    code: str
    category: str
    is_active: bool
    registered_professionals: int
    active_job_offers: int
    popularity: int
    last_updated: datetime
    
    model_config = {"from_attributes": True}


class RecomputeAllResponse(BaseModel):
    """Outcome of a sweep over every active profession."""
    
    updated: list[ProfessionResponse]
    failed: list[UUID] = Field(default_factory=list, description="Professions that could not be recomputed")


class CurriculumProfessionRequest(BaseModel):
    """Request schema for linking a profession to a curriculum."""
    
    profession_id: UUID
    experience_years: int = Field(0, ge=0, le=70)
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER


class ProfessionLinkResponse(BaseModel):
    profession_id: UUID
    registration_date: datetime
    experience_years: int
    proficiency_level: ProficiencyLevel
    
    model_config = {"from_attributes": True}


class CurriculumResponse(BaseModel):
    id: UUID
    professional_id: UUID
    is_active: bool
    professions: list[ProfessionLinkResponse]
    
    model_config = {"from_attributes": True}


class ProfessionalResponse(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    is_active: bool
    
    model_config = {"from_attributes": True}
