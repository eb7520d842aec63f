"""Curriculum repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import Curriculum


class ICurriculumRepository(ABC):
    """Abstract repository interface for Curriculum entity."""

    @abstractmethod
    async def create(self, curriculum: Curriculum) -> Curriculum:
        """Persist a new curriculum with its profession links."""
        pass

    @abstractmethod
    async def get_by_id(self, curriculum_id: UUID) -> Optional[Curriculum]:
        """Retrieve a curriculum by ID."""
        pass

    @abstractmethod
    async def get_by_professional_id(self, professional_id: UUID) -> Optional[Curriculum]:
        """Retrieve the curriculum owned by a professional."""
        pass

    @abstractmethod
    async def update(self, curriculum: Curriculum) -> Curriculum:
        """Persist an existing curriculum, replacing its profession links."""
        pass

    @abstractmethod
    async def count_registered(self, profession_id: UUID) -> int:
        """
        Count active curricula of active professionals linking a profession.

        Args:
            profession_id: Profession UUID

        Returns:
            Number of registered professionals
        """
        pass
