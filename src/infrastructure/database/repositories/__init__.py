"""Repository implementations."""

from .sqlalchemy_job_offer_repository import SQLAlchemyJobOfferRepository
from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_profession_repository import SQLAlchemyProfessionRepository
from .sqlalchemy_professional_repository import SQLAlchemyProfessionalRepository
from .sqlalchemy_curriculum_repository import SQLAlchemyCurriculumRepository

__all__ = [
    "SQLAlchemyJobOfferRepository",
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyProfessionRepository",
    "SQLAlchemyProfessionalRepository",
    "SQLAlchemyCurriculumRepository",
]
