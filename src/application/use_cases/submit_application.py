"""Submit application - Admission with a single retry on a storage conflict."""

from typing import Any
from uuid import UUID

from application.services import ApplicationAdmissionService
from domain.entities import Application
from domain.exceptions import ConcurrencyConflictError
from infrastructure.config import get_logger


class SubmitApplicationUseCase:
    """
    Create an application for a professional.
    
    When the storage constraint rejects the insert because a concurrent
    request won the race, admission is evaluated once more. The second
    evaluation normally refuses with "duplicate application"; if it admits
    the application, the insert is attempted exactly once more.
    """
    
    def __init__(self, admission_service: ApplicationAdmissionService):
        self.admission = admission_service
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(
        self,
        professional_id: UUID,
        job_offer_id: UUID,
        **content: Any,
    ) -> Application:
        try:
            return await self.admission.create_application(
                professional_id, job_offer_id, **content
            )
        except ConcurrencyConflictError:
            self.logger.warning(
                "Concurrent application detected, re-checking admission",
                extra={"professional_id": professional_id, "job_offer_id": job_offer_id},
            )
        
        return await self.admission.create_application(
            professional_id, job_offer_id, **content
        )
