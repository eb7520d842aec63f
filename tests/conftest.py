"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from application.services import (
    ApplicationAdmissionService,
    ApplicationLifecycleService,
    JobOfferLifecycleService,
    ProfessionDemandTracker,
    StatisticsAggregator,
)
from infrastructure.database import Base
import infrastructure.database.models  # noqa: F401

from fakes import (
    FrozenClock,
    InMemoryApplicationRepository,
    InMemoryCurriculumRepository,
    InMemoryJobOfferRepository,
    InMemoryProfessionalRepository,
    InMemoryProfessionRepository,
    make_job_offer,
    make_profession,
    make_professional,
)


NOW = datetime(2024, 5, 15, 12, 0, 0)
MONTHLY_CAP = 3


@pytest.fixture
def now():
    """Fixed reference time, mid-month."""
    return NOW


@pytest.fixture
def clock():
    """Clock frozen at NOW that tests may advance."""
    return FrozenClock(NOW)


# In-memory repositories

@pytest.fixture
def job_offer_repo():
    return InMemoryJobOfferRepository()


@pytest.fixture
def application_repo():
    return InMemoryApplicationRepository()


@pytest.fixture
def profession_repo():
    return InMemoryProfessionRepository()


@pytest.fixture
def professional_repo():
    return InMemoryProfessionalRepository()


@pytest.fixture
def curriculum_repo(professional_repo):
    return InMemoryCurriculumRepository(professional_repo)


# Services

@pytest.fixture
def tracker(profession_repo, curriculum_repo, job_offer_repo, clock):
    return ProfessionDemandTracker(profession_repo, curriculum_repo, job_offer_repo, clock=clock)


@pytest.fixture
def job_offer_service(job_offer_repo, profession_repo, tracker, clock):
    return JobOfferLifecycleService(job_offer_repo, profession_repo, tracker, clock=clock)


@pytest.fixture
def admission(application_repo, job_offer_repo, professional_repo, clock):
    return ApplicationAdmissionService(
        application_repo,
        job_offer_repo,
        professional_repo,
        monthly_cap=MONTHLY_CAP,
        clock=clock,
    )


@pytest.fixture
def application_service(application_repo, job_offer_repo, clock):
    return ApplicationLifecycleService(application_repo, job_offer_repo, clock=clock)


@pytest.fixture
def aggregator(application_repo, job_offer_repo, clock):
    return StatisticsAggregator(application_repo, job_offer_repo, clock=clock)


# Seeded records

@pytest.fixture
async def profession(profession_repo):
    """An active catalog profession."""
    return await profession_repo.create(make_profession())


@pytest.fixture
async def professional(professional_repo):
    """An active professional."""
    return await professional_repo.create(make_professional())


@pytest.fixture
async def published_offer(job_offer_repo, profession, now):
    """A published offer accepting applications for ten more days."""
    return await job_offer_repo.create(make_job_offer(now, [profession.id]))


# SQLAlchemy

@pytest.fixture
async def engine():
    """In-memory SQLite engine with the full schema."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
