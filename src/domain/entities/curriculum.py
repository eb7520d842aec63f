"""Curriculum entity holding a professional's profession links."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from domain.clock import utc_now
from domain.enums import ProficiencyLevel
from domain.exceptions import ValidationError


@dataclass
class ProfessionLink:
    """
    Value object linking a curriculum to a catalog profession.

    Attributes:
        profession_id: Linked profession
        registration_date: When the link was added
        experience_years: Years of experience in the profession
        proficiency_level: Self-declared proficiency
    """

    profession_id: UUID
    registration_date: datetime = field(default_factory=utc_now)
    experience_years: int = 0
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER

    def __post_init__(self) -> None:
        if self.experience_years < 0:
            raise ValueError("Experience years cannot be negative")


@dataclass
class Curriculum:
    """
    Entity representing a professional's resume.

    This is an aggregate root; profession links are only changed through
    ``add_profession`` and ``remove_profession``.
    """

    professional_id: UUID
    id: UUID = field(default_factory=uuid4)
    professions: list[ProfessionLink] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def profession_ids(self) -> list[UUID]:
        return [link.profession_id for link in self.professions]

    def has_profession(self, profession_id: UUID) -> bool:
        return any(link.profession_id == profession_id for link in self.professions)

    def add_profession(
        self,
        profession_id: UUID,
        now: datetime,
        experience_years: int = 0,
        proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER,
    ) -> bool:
        """
        Link a profession to the curriculum.

        Returns:
            True if the link was added, False if it already existed
        """
        if self.has_profession(profession_id):
            return False

        self.professions.append(
            ProfessionLink(
                profession_id=profession_id,
                registration_date=now,
                experience_years=experience_years,
                proficiency_level=proficiency_level,
            )
        )
        self._mark_updated(now)
        return True

    def remove_profession(self, profession_id: UUID, now: datetime) -> bool:
        """
        Unlink a profession.

        Returns:
            True if a link was removed, False if there was no such link

        Raises:
            ValidationError: If it is the last profession of the curriculum
        """
        remaining = [p for p in self.professions if p.profession_id != profession_id]
        if len(remaining) == len(self.professions):
            return False
        if not remaining:
            raise ValidationError(
                "professions",
                "A curriculum must keep at least one profession",
            )

        self.professions = remaining
        self._mark_updated(now)
        return True

    def set_active(self, active: bool, now: datetime) -> bool:
        if self.is_active == active:
            return False
        self.is_active = active
        self._mark_updated(now)
        return True

    def get_link(self, profession_id: UUID) -> Optional[ProfessionLink]:
        for link in self.professions:
            if link.profession_id == profession_id:
                return link
        return None

    def _mark_updated(self, now: datetime) -> None:
        """Mark the entity as updated."""
        self.updated_at = now

    def __str__(self) -> str:
        return f"Curriculum(id={self.id}, professions={len(self.professions)})"
