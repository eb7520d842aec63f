"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from application.services import (
    ApplicationAdmissionService,
    ApplicationLifecycleService,
    JobOfferLifecycleService,
    ProfessionDemandTracker,
    StatisticsAggregator,
)
from application.use_cases import (
    AddCurriculumProfessionUseCase,
    RemoveCurriculumProfessionUseCase,
    SetCurriculumActiveUseCase,
    SetProfessionalActiveUseCase,
    SubmitApplicationUseCase,
)
from domain.clock import Clock, utc_now
from domain.repositories import (
    IApplicationRepository,
    ICurriculumRepository,
    IJobOfferRepository,
    IProfessionalRepository,
    IProfessionRepository,
)
from infrastructure.config import Settings, get_settings
from infrastructure.database import session_scope
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyCurriculumRepository,
    SQLAlchemyJobOfferRepository,
    SQLAlchemyProfessionalRepository,
    SQLAlchemyProfessionRepository,
)


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency. One session per request.
    
    An exception raised by the endpoint is thrown back in at the ``yield``
    and rolls the session back.
    """
    async with session_scope() as session:
        yield session


def get_clock() -> Clock:
    """Time source shared by every service of a request."""
    return utc_now


# Repository dependencies
def get_job_offer_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IJobOfferRepository:
    return SQLAlchemyJobOfferRepository(session)


def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApplicationRepository:
    return SQLAlchemyApplicationRepository(session)


def get_profession_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IProfessionRepository:
    return SQLAlchemyProfessionRepository(session)


def get_professional_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IProfessionalRepository:
    return SQLAlchemyProfessionalRepository(session)


def get_curriculum_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ICurriculumRepository:
    return SQLAlchemyCurriculumRepository(session)


# Service dependencies
def get_demand_tracker(
    profession_repo: IProfessionRepository = Depends(get_profession_repository),
    curriculum_repo: ICurriculumRepository = Depends(get_curriculum_repository),
    job_offer_repo: IJobOfferRepository = Depends(get_job_offer_repository),
    clock: Clock = Depends(get_clock),
) -> ProfessionDemandTracker:
    """Get profession demand tracker dependency."""
    return ProfessionDemandTracker(profession_repo, curriculum_repo, job_offer_repo, clock=clock)


def get_job_offer_service(
    job_offer_repo: IJobOfferRepository = Depends(get_job_offer_repository),
    profession_repo: IProfessionRepository = Depends(get_profession_repository),
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> JobOfferLifecycleService:
    """Get job offer lifecycle service dependency."""
    return JobOfferLifecycleService(
        job_offer_repo,
        profession_repo,
        tracker,
        default_max_applications=settings.default_max_applications,
        clock=clock,
    )


def get_admission_service(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    job_offer_repo: IJobOfferRepository = Depends(get_job_offer_repository),
    professional_repo: IProfessionalRepository = Depends(get_professional_repository),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
) -> ApplicationAdmissionService:
    """Get admission control service dependency."""
    return ApplicationAdmissionService(
        application_repo,
        job_offer_repo,
        professional_repo,
        monthly_cap=settings.monthly_application_cap,
        clock=clock,
    )


def get_application_service(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    job_offer_repo: IJobOfferRepository = Depends(get_job_offer_repository),
    clock: Clock = Depends(get_clock),
) -> ApplicationLifecycleService:
    """Get application lifecycle service dependency."""
    return ApplicationLifecycleService(application_repo, job_offer_repo, clock=clock)


def get_statistics_aggregator(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    job_offer_repo: IJobOfferRepository = Depends(get_job_offer_repository),
    clock: Clock = Depends(get_clock),
) -> StatisticsAggregator:
    return StatisticsAggregator(application_repo, job_offer_repo, clock=clock)


# Use case dependencies
def get_submit_application_use_case(
    admission: ApplicationAdmissionService = Depends(get_admission_service),
) -> SubmitApplicationUseCase:
    return SubmitApplicationUseCase(admission)


def get_add_curriculum_profession_use_case(
    curriculum_repo: ICurriculumRepository = Depends(get_curriculum_repository),
    profession_repo: IProfessionRepository = Depends(get_profession_repository),
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
    clock: Clock = Depends(get_clock),
) -> AddCurriculumProfessionUseCase:
    return AddCurriculumProfessionUseCase(curriculum_repo, profession_repo, tracker, clock=clock)


def get_remove_curriculum_profession_use_case(
    curriculum_repo: ICurriculumRepository = Depends(get_curriculum_repository),
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
    clock: Clock = Depends(get_clock),
) -> RemoveCurriculumProfessionUseCase:
    return RemoveCurriculumProfessionUseCase(curriculum_repo, tracker, clock=clock)


def get_set_professional_active_use_case(
    professional_repo: IProfessionalRepository = Depends(get_professional_repository),
    curriculum_repo: ICurriculumRepository = Depends(get_curriculum_repository),
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
    clock: Clock = Depends(get_clock),
) -> SetProfessionalActiveUseCase:
    return SetProfessionalActiveUseCase(professional_repo, curriculum_repo, tracker, clock=clock)


def get_set_curriculum_active_use_case(
    curriculum_repo: ICurriculumRepository = Depends(get_curriculum_repository),
    tracker: ProfessionDemandTracker = Depends(get_demand_tracker),
    clock: Clock = Depends(get_clock),
) -> SetCurriculumActiveUseCase:
    return SetCurriculumActiveUseCase(curriculum_repo, tracker, clock=clock)
