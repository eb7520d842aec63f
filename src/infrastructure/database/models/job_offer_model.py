"""Job offer SQLAlchemy models."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Text, Integer, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class JobOfferModel(Base):
    """SQLAlchemy model for job offers."""
    
    __tablename__ = "job_offers"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    employer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    
    # State
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    application_deadline: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    max_applications: Mapped[int] = mapped_column(Integer, default=50, nullable=False)
    
    # Counters
    view_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    application_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    
    # Timestamps
    published_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    
    required_professions: Mapped[list["JobOfferProfessionModel"]] = relationship(
        "JobOfferProfessionModel",
        back_populates="job_offer",
        cascade="all, delete-orphan",
        order_by="JobOfferProfessionModel.position",
    )
    
    def __repr__(self) -> str:
        return f"<JobOfferModel(id={self.id}, status={self.status})>"


class JobOfferProfessionModel(Base):
    """Association between a job offer and a required profession."""
    
    __tablename__ = "job_offer_professions"
    
    job_offer_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("job_offers.id", ondelete="CASCADE"),
        primary_key=True,
    )
    profession_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("professions.id"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    
    job_offer: Mapped["JobOfferModel"] = relationship(
        "JobOfferModel",
        back_populates="required_professions",
    )
    
    def __repr__(self) -> str:
        return f"<JobOfferProfessionModel({self.job_offer_id} -> {self.profession_id})>"
