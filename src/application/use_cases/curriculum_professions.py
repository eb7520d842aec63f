"""Curriculum profession links - Add and remove with counter refresh."""

from uuid import UUID

from application.services import ProfessionDemandTracker
from domain.clock import Clock, utc_now
from domain.entities import Curriculum
from domain.enums import ProficiencyLevel
from domain.exceptions import NotFoundError, ValidationError
from domain.repositories import ICurriculumRepository, IProfessionRepository
from infrastructure.config import get_logger


async def _load_curriculum(repo: ICurriculumRepository, curriculum_id: UUID) -> Curriculum:
    curriculum = await repo.get_by_id(curriculum_id)
    if curriculum is None:
        raise NotFoundError("Curriculum", curriculum_id)
    return curriculum


class AddCurriculumProfessionUseCase:
    """Link an active catalog profession to a curriculum."""
    
    def __init__(
        self,
        curriculum_repository: ICurriculumRepository,
        profession_repository: IProfessionRepository,
        demand_tracker: ProfessionDemandTracker,
        clock: Clock = utc_now,
    ):
        self.curriculum_repo = curriculum_repository
        self.profession_repo = profession_repository
        self.demand_tracker = demand_tracker
        self._clock = clock
        self.logger = get_logger(self.__class__.__name__)
    
    async def execute(
        self,
        curriculum_id: UUID,
        profession_id: UUID,
        experience_years: int = 0,
        proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER,
    ) -> Curriculum:
        """
        Add the profession link and refresh the profession counters.
        
        Adding a profession that is already linked leaves the curriculum
        unchanged.
        
        Raises:
            NotFoundError: If the curriculum or profession does not exist
            ValidationError: If the profession is inactive
        """
        curriculum = await _load_curriculum(self.curriculum_repo, curriculum_id)
        
        profession = await self.profession_repo.get_by_id(profession_id)
        if profession is None:
            raise NotFoundError("Profession", profession_id)
        if not profession.is_active:
            raise ValidationError("profession_id", "Profession is not active")
        
        added = curriculum.add_profession(
            profession_id,
            self._clock(),
            experience_years=experience_years,
            proficiency_level=proficiency_level,
        )
        if not added:
            return curriculum
        
        saved = await self.curriculum_repo.update(curriculum)
        self.logger.info(f"Curriculum {saved.id} linked to profession {profession.code}")
        await self.demand_tracker.recompute(profession_id)
        return saved


class RemoveCurriculumProfessionUseCase:
    """Unlink a profession from a curriculum."""
    
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
    
    async def execute(self, curriculum_id: UUID, profession_id: UUID) -> Curriculum:
        curriculum = await _load_curriculum(self.curriculum_repo, curriculum_id)
        
        if not curriculum.remove_profession(profession_id, self._clock()):
            raise NotFoundError("Curriculum profession", profession_id)
        
        saved = await self.curriculum_repo.update(curriculum)
        self.logger.info(f"Curriculum {saved.id} unlinked from profession {profession_id}")
        await self.demand_tracker.recompute(profession_id)
        return saved
