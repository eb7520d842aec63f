"""SQLAlchemy ORM models."""

from .job_offer_model import JobOfferModel, JobOfferProfessionModel
from .application_model import ApplicationModel
from .profession_model import ProfessionModel
from .professional_model import ProfessionalModel
from .curriculum_model import CurriculumModel, CurriculumProfessionModel

__all__ = [
    "JobOfferModel",
    "JobOfferProfessionModel",
    "ApplicationModel",
    "ProfessionModel",
    "ProfessionalModel",
    "CurriculumModel",
    "CurriculumProfessionModel",
]
