"""Proficiency levels for curriculum profession links."""

from enum import Enum


class ProficiencyLevel(str, Enum):
    """Self-declared proficiency in a profession."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    def __str__(self) -> str:
        return self.value
