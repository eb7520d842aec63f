"""Profession SQLAlchemy model."""

from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import String, Text, Integer, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class ProfessionModel(Base):
    """SQLAlchemy model for the profession catalog."""
    
    __tablename__ = "professions"
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    
    # Denormalized demand counters
    registered_professionals: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    active_job_offers: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    
    def __repr__(self) -> str:
        return f"<ProfessionModel(id={self.id}, code={self.code})>"
