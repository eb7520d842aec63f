"""Application SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import (
    String,
    Text,
    Integer,
    Boolean,
    DateTime,
    ForeignKey,
    JSON,
    UniqueConstraint,
    Index,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class ApplicationModel(Base):
    """
    SQLAlchemy model for job applications.
    
    ``status_class`` is "open" for non-deleted pending/accepted rows and NULL
    otherwise. NULLs never collide in a unique constraint, so the constraint
    allows at most one open application per professional and offer.
    """
    
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint(
            "professional_id",
            "job_offer_id",
            "status_class",
            name="uq_applications_open_per_offer",
        ),
        Index("ix_applications_professional_applied", "professional_id", "applied_at"),
        Index("ix_applications_offer_status", "job_offer_id", "status"),
    )
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    # Foreign keys
    professional_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("professionals.id"),
        nullable=False,
        index=True,
    )
    job_offer_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("job_offers.id"),
        nullable=False,
        index=True,
    )
    
    # State
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    record_state: Mapped[str] = mapped_column(String(20), nullable=False)
    status_class: Mapped[str | None] = mapped_column(String(10), nullable=True)
    priority: Mapped[str] = mapped_column(String(10), nullable=False)
    
    # Content
    cover_letter: Mapped[str | None] = mapped_column(Text, nullable=True)
    motivation: Mapped[str | None] = mapped_column(Text, nullable=True)
    expected_salary_amount: Mapped[int | None] = mapped_column(Integer, nullable=True)
    expected_salary_currency: Mapped[str | None] = mapped_column(String(3), nullable=True)
    expected_salary_negotiable: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    availability_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    additional_skills: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    
    # Review
    applied_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    reviewed_by: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    
    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, status={self.status})>"
