"""Use cases for association-changing and retrying workflows."""

from .submit_application import SubmitApplicationUseCase
from .curriculum_professions import (
    AddCurriculumProfessionUseCase,
    RemoveCurriculumProfessionUseCase,
)
from .set_activation import SetProfessionalActiveUseCase, SetCurriculumActiveUseCase

__all__ = [
    "SubmitApplicationUseCase",
    "AddCurriculumProfessionUseCase",
    "RemoveCurriculumProfessionUseCase",
    "SetProfessionalActiveUseCase",
    "SetCurriculumActiveUseCase",
]
