"""Curriculum and profession link SQLAlchemy models."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infrastructure.database.session import Base


class CurriculumModel(Base):
    """SQLAlchemy model for curricula."""
    
    __tablename__ = "curricula"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    # One curriculum per professional
    professional_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("professionals.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    
    professions: Mapped[list["CurriculumProfessionModel"]] = relationship(
        "CurriculumProfessionModel",
        back_populates="curriculum",
        cascade="all, delete-orphan",
        order_by="CurriculumProfessionModel.registration_date",
    )
    
    def __repr__(self) -> str:
        return f"<CurriculumModel(id={self.id}, professional_id={self.professional_id})>"


class CurriculumProfessionModel(Base):
    """Profession linked from a curriculum."""
    
    __tablename__ = "curriculum_professions"
    
    curriculum_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("curricula.id", ondelete="CASCADE"),
        primary_key=True,
    )
    profession_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("professions.id"),
        primary_key=True,
        index=True,
    )
    registration_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    experience_years: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    proficiency_level: Mapped[str] = mapped_column(String(20), nullable=False)
    
    curriculum: Mapped["CurriculumModel"] = relationship(
        "CurriculumModel",
        back_populates="professions",
    )
    
    def __repr__(self) -> str:
        return f"<CurriculumProfessionModel({self.curriculum_id} -> {self.profession_id})>"
