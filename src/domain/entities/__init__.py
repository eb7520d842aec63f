"""Domain Entities - Objects with identity."""

from .job_offer import JobOffer
from .application import Application
from .profession import Profession
from .professional import Professional
from .curriculum import Curriculum, ProfessionLink

__all__ = [
    "JobOffer",
    "Application",
    "Profession",
    "Professional",
    "Curriculum",
    "ProfessionLink",
]
