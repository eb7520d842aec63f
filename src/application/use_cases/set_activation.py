"""Activation of professionals and curricula.

Both flags decide whether a curriculum counts as a registered professional,
so every change is followed by a recompute of the linked professions.
"""

from uuid import UUID

from application.services import ProfessionDemandTracker
from domain.clock import Clock, utc_now
from domain.entities import Curriculum, Professional
from domain.exceptions import NotFoundError
from domain.repositories import ICurriculumRepository, IProfessionalRepository
from infrastructure.config import get_logger


class SetProfessionalActiveUseCase:
    """Activate or deactivate a professional."""
    
    def __init__(
        self,
        professional_repository: IProfessionalRepository,
        curriculum_repository: ICurriculumRepository,
        demand_tracker: ProfessionDemandTracker,
        clock: Clock = utc_now,
    ):
        self.professional_repo = professional_repository
        self.curriculum_repo = curriculum_repository
        self.demand_tracker = demand_tracker
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, professional_id: UUID, active: bool) -> Professional:
        professional = await self.professional_repo.get_by_id(professional_id)
        if professional is None:
            raise NotFoundError("Professional", professional_id)
        
        if not professional.set_active(active, self._clock()):
            return professional
        
        saved = await self.professional_repo.update(professional)
        self.logger.info(f"Professional {saved.id} active={saved.is_active}")
        
        curriculum = await self.curriculum_repo.get_by_professional_id(professional_id)
        if curriculum is not None:
            await self.demand_tracker.recompute_many(curriculum.profession_ids)
        return saved


class SetCurriculumActiveUseCase:
    """Activate or deactivate a curriculum."""
    
    def __init__(
        self,
        curriculum_repository: ICurriculumRepository,
        demand_tracker: ProfessionDemandTracker,
        clock: Clock = utc_now,
    ):
        self.curriculum_repo = curriculum_repository
        self.demand_tracker = demand_tracker
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(self, curriculum_id: UUID, active: bool) -> Curriculum:
        curriculum = await self.curriculum_repo.get_by_id(curriculum_id)
        if curriculum is None:
            raise NotFoundError("Curriculum", curriculum_id)
        
        if not curriculum.set_active(active, self._clock()):
            return curriculum
        
        saved = await self.curriculum_repo.update(curriculum)
        self.logger.info(f"Curriculum {saved.id} active={saved.is_active}")
        await self.demand_tracker.recompute_many(saved.profession_ids)
        return saved
