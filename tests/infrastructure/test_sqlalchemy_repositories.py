"""Integration tests for the SQLAlchemy repositories on in-memory SQLite."""

from datetime import timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest
from sqlalchemy import select

from application.services import ProfessionDemandTracker
from domain.entities import Application, Curriculum
from domain.enums import ApplicationStatus, JobOfferStatus
from domain.exceptions import ConcurrencyConflictError, NotFoundError
from domain.repositories import ApplicationCriteria, JobOfferCriteria
from domain.value_objects import ExpectedSalary, MonthWindow
from infrastructure.database.models import ProfessionModel
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyCurriculumRepository,
    SQLAlchemyJobOfferRepository,
    SQLAlchemyProfessionalRepository,
    SQLAlchemyProfessionRepository,
)

from fakes import FrozenClock, make_job_offer, make_profession, make_professional


@pytest.fixture
def repos(db_session):
    return SimpleNamespace(
        job_offers=SQLAlchemyJobOfferRepository(db_session),
        applications=SQLAlchemyApplicationRepository(db_session),
        professions=SQLAlchemyProfessionRepository(db_session),
        professionals=SQLAlchemyProfessionalRepository(db_session),
        curricula=SQLAlchemyCurriculumRepository(db_session),
    )


@pytest.fixture
async def seeded(repos, db_session, now):
    """One profession, one professional and one published offer, committed."""
    profession = await repos.professions.create(make_profession())
    professional = await repos.professionals.create(make_professional())
    offer = await repos.job_offers.create(make_job_offer(now, [profession.id]))
    await db_session.commit()
    return profession, professional, offer


class TestJobOfferRepository:
    """Test SQLAlchemyJobOfferRepository."""

    async def test_round_trip_keeps_profession_order(self, repos, now):
        """Test that a stored offer keeps its profession order."""
        first = await repos.professions.create(make_profession("Plumber", "PLMB"))
        second = await repos.professions.create(make_profession("Glazier", "GLAZ"))
        offer = make_job_offer(now, [second.id, first.id])

        await repos.job_offers.create(offer)
        loaded = await repos.job_offers.get_by_id(offer.id)

        assert loaded.required_profession_ids == [second.id, first.id]
        assert loaded.status == JobOfferStatus.PUBLISHED
        assert loaded.application_deadline == offer.application_deadline

    async def test_update_replaces_professions(self, repos, db_session, now):
        """Test that an update rewrites the profession links."""
        kept = await repos.professions.create(make_profession("Plumber", "PLMB"))
        dropped = await repos.professions.create(make_profession("Glazier", "GLAZ"))
        added = await repos.professions.create(make_profession("Roofer", "ROOF"))
        offer = await repos.job_offers.create(make_job_offer(now, [kept.id, dropped.id]))
        await db_session.commit()

        offer.change_required_professions([kept.id, added.id], now)
        offer.close(now)
        await repos.job_offers.update(offer)
        await db_session.commit()

        loaded = await repos.job_offers.get_by_id(offer.id)
        assert loaded.required_profession_ids == [kept.id, added.id]
        assert loaded.status == JobOfferStatus.CLOSED
        assert loaded.is_active is False

    async def test_count_by_criteria(self, repos, now):
        """Test counting offers by criteria."""
        profession = await repos.professions.create(make_profession())
        await repos.job_offers.create(make_job_offer(now, [profession.id]))
        await repos.job_offers.create(make_job_offer(now, [profession.id], is_active=False))
        await repos.job_offers.create(
            make_job_offer(now, [profession.id], deadline=now - timedelta(days=1))
        )

        active = JobOfferCriteria(required_profession_id=profession.id, is_active=True)
        assert await repos.job_offers.count(active) == 2
        assert await repos.job_offers.count(JobOfferCriteria(deadline_before=now)) == 1
        assert await repos.job_offers.count(JobOfferCriteria(required_profession_id=uuid4())) == 0

    async def test_update_unknown_offer_raises_error(self, repos, now):
        """Test that updating a missing offer raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await repos.job_offers.update(make_job_offer(now))


class TestApplicationRepository:
    """Test SQLAlchemyApplicationRepository."""

    async def test_round_trip(self, repos, seeded, now):
        """Test storing and loading an application with its content."""
        _, professional, offer = seeded
        application = Application.submit(
            professional.id,
            offer.id,
            now,
            expected_salary=ExpectedSalary(amount=800, currency="USD", is_negotiable=False),
            additional_skills=["welding"],
        )

        await repos.applications.create(application)
        loaded = await repos.applications.get_by_id(application.id)

        assert loaded.status == ApplicationStatus.PENDING
        assert loaded.expected_salary == ExpectedSalary(800, "USD", False)
        assert loaded.additional_skills == ["welding"]

    async def test_second_open_application_violates_constraint(self, repos, seeded, now):
        """Test that a second open application violates the unique constraint."""
        _, professional, offer = seeded
        await repos.applications.create(Application.submit(professional.id, offer.id, now))

        with pytest.raises(ConcurrencyConflictError):
            await repos.applications.create(Application.submit(professional.id, offer.id, now))

        # The failed unit of work was rolled back, committed rows are intact
        criteria = ApplicationCriteria(professional_id=professional.id)
        assert await repos.applications.count(criteria) == 0
        assert await repos.job_offers.get_by_id(offer.id) is not None

    async def test_rejected_and_deleted_rows_do_not_block(self, repos, db_session, seeded, now):
        """Test that rejected and deleted rows leave the constraint free."""
        _, professional, offer = seeded
        rejected = Application.submit(professional.id, offer.id, now)
        await repos.applications.create(rejected)
        rejected.reject(now)
        await repos.applications.update(rejected)

        withdrawn = Application.submit(professional.id, offer.id, now)
        await repos.applications.create(withdrawn)
        withdrawn.soft_delete(now)
        await repos.applications.update(withdrawn)

        await repos.applications.create(Application.submit(professional.id, offer.id, now))
        await db_session.commit()

        assert await repos.applications.count(ApplicationCriteria(include_deleted=True)) == 3
        assert await repos.applications.count(ApplicationCriteria()) == 2
        assert await repos.applications.count(
            ApplicationCriteria.open_for(professional.id, offer.id)
        ) == 1

    async def test_monthly_criteria(self, repos, seeded, now):
        """Test that the monthly criteria use the window bounds."""
        _, professional, offer = seeded
        other_offer = await repos.job_offers.create(make_job_offer(now, offer.required_profession_ids))
        window = MonthWindow.containing(now)
        await repos.applications.create(Application(professional.id, offer.id, applied_at=now))
        await repos.applications.create(
            Application(professional.id, other_offer.id, applied_at=window.start - timedelta(seconds=1))
        )

        criteria = ApplicationCriteria.counted_in_month(professional.id, window.start, window.end)
        assert await repos.applications.count(criteria) == 1

    async def test_find_reviewed(self, repos, seeded, now):
        """Test finding reviewed applications."""
        _, professional, offer = seeded
        application = Application.submit(professional.id, offer.id, now - timedelta(days=1))
        await repos.applications.create(application)
        application.accept(now)
        await repos.applications.update(application)

        reviewed = await repos.applications.find(ApplicationCriteria(reviewed=True))

        assert [a.id for a in reviewed] == [application.id]
        assert reviewed[0].reviewed_at == now


class TestProfessionAndCurriculumRepositories:
    """Test the profession and curriculum repositories."""

    async def test_count_registered(self, repos, now):
        """Test that only active curricula of active owners are counted."""
        profession = await repos.professions.create(make_profession())
        for owner_active, curriculum_active in ((True, True), (True, True), (False, True), (True, False)):
            owner = await repos.professionals.create(make_professional(is_active=owner_active))
            curriculum = Curriculum(professional_id=owner.id, is_active=curriculum_active)
            curriculum.add_profession(profession.id, now)
            await repos.curricula.create(curriculum)

        assert await repos.curricula.count_registered(profession.id) == 2

    async def test_curriculum_link_changes_are_persisted(self, repos, db_session, now):
        """Test that link changes of a curriculum are stored."""
        plumber = await repos.professions.create(make_profession("Plumber", "PLMB"))
        roofer = await repos.professions.create(make_profession("Roofer", "ROOF"))
        owner = await repos.professionals.create(make_professional())
        curriculum = Curriculum(professional_id=owner.id)
        curriculum.add_profession(plumber.id, now)
        await repos.curricula.create(curriculum)
        await db_session.commit()

        curriculum.add_profession(roofer.id, now, experience_years=2)
        curriculum.remove_profession(plumber.id, now)
        await repos.curricula.update(curriculum)
        await db_session.commit()

        loaded = await repos.curricula.get_by_professional_id(owner.id)
        assert loaded.profession_ids == [roofer.id]
        assert loaded.get_link(roofer.id).experience_years == 2

    async def test_save_counters(self, repos, now):
        """Test writing the profession counters."""
        profession = await repos.professions.create(make_profession())

        saved = await repos.professions.save_counters(profession.id, 4, 2, now)

        assert (saved.registered_professionals, saved.active_job_offers) == (4, 2)
        loaded = await repos.professions.get_by_id(profession.id)
        assert loaded.last_updated == now

    async def test_save_counters_of_unknown_profession_raises_error(self, repos, now):
        """Test that writing counters of a missing profession raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await repos.professions.save_counters(uuid4(), 0, 0, now)

    async def test_list_active_and_get_many(self, repos):
        """Test listing active professions and fetching several by id."""
        active = await repos.professions.create(make_profession("Plumber", "PLMB"))
        retired = await repos.professions.create(make_profession("Lamplighter", "LAMP", is_active=False))

        assert [p.id for p in await repos.professions.list_active()] == [active.id]
        found = await repos.professions.get_many([active.id, retired.id, uuid4()])
        assert {p.id for p in found} == {active.id, retired.id}


class TestProfessionalRepository:
    """Test SQLAlchemyProfessionalRepository."""

    async def test_lock_for_admission(self, repos, db_session):
        """Test that the locked read returns the stored professional."""
        professional = await repos.professionals.create(make_professional())
        await db_session.commit()

        locked = await repos.professionals.lock_for_admission(professional.id)

        assert locked.id == professional.id
        assert locked.email == professional.email

    async def test_lock_for_admission_of_unknown_professional(self, repos):
        """Test that locking a missing professional returns None."""
        assert await repos.professionals.lock_for_admission(uuid4()) is None


class TestProfessionSweep:
    """Counter sweep over one shared session."""

    async def test_failed_profession_keeps_the_others(self, repos, db_session, now, monkeypatch):
        """Test that a database error on one profession rolls back only that profession."""
        professions = [
            await repos.professions.create(make_profession(name, code))
            for name, code in (("Architect", "ARCH"), ("Bricklayer", "BRCK"), ("Carpenter", "CARP"))
        ]
        for profession in professions:
            await repos.job_offers.create(make_job_offer(now, [profession.id]))
        broken = professions[1]
        save_counters = repos.professions.save_counters

        async def null_counter_for_broken(profession_id, **counters):
            if profession_id == broken.id:
                # Violates NOT NULL on flush
                counters["registered_professionals"] = None
            return await save_counters(profession_id, **counters)

        monkeypatch.setattr(repos.professions, "save_counters", null_counter_for_broken)
        tracker = ProfessionDemandTracker(
            repos.professions, repos.curricula, repos.job_offers, clock=FrozenClock(now)
        )

        report = await tracker.recompute_all()
        await db_session.commit()

        assert [p.id for p in report.updated] == [professions[0].id, professions[2].id]
        assert report.failed == [broken.id]
        rows = await db_session.execute(
            select(ProfessionModel.code, ProfessionModel.active_job_offers)
        )
        assert dict(rows.all()) == {"ARCH": 1, "BRCK": 0, "CARP": 1}

    async def test_savepoint_keeps_earlier_writes(self, repos, db_session, now):
        """Test that leaving a savepoint with an error keeps writes made before it."""
        kept = await repos.professions.create(make_profession("Plumber", "PLMB"))

        with pytest.raises(RuntimeError):
            async with repos.professions.savepoint():
                await repos.professions.save_counters(kept.id, 7, 7, now)
                raise RuntimeError("abort")

        await db_session.commit()
        loaded = await repos.professions.get_by_id(kept.id)
        assert loaded is not None
        assert loaded.registered_professionals == 0
