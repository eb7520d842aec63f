"""Domain Repository Interfaces - Abstract definitions."""

from .criteria import ApplicationCriteria, JobOfferCriteria
from .job_offer_repository import IJobOfferRepository
from .application_repository import IApplicationRepository
from .profession_repository import IProfessionRepository
from .professional_repository import IProfessionalRepository
from .curriculum_repository import ICurriculumRepository

__all__ = [
    "ApplicationCriteria",
    "JobOfferCriteria",
    "IJobOfferRepository",
    "IApplicationRepository",
    "IProfessionRepository",
    "IProfessionalRepository",
    "ICurriculumRepository",
]
