"""Tests for the profession demand tracker and the association use cases."""

from uuid import uuid4

import pytest
from application.services import ProfessionDemandTracker
from application.use_cases import (
    AddCurriculumProfessionUseCase,
    RemoveCurriculumProfessionUseCase,
    SetCurriculumActiveUseCase,
    SetProfessionalActiveUseCase,
)
from domain.entities import Curriculum
from domain.exceptions import NotFoundError, ValidationError

from fakes import InMemoryCurriculumRepository, make_job_offer, make_profession, make_professional


async def _curriculum(professional_repo, curriculum_repo, profession_ids, now, active=True, owner_active=True):
    owner = await professional_repo.create(make_professional(is_active=owner_active))
    curriculum = Curriculum(professional_id=owner.id, is_active=active)
    for profession_id in profession_ids:
        curriculum.add_profession(profession_id, now)
    return await curriculum_repo.create(curriculum)


class TestRecompute:
    """Test recomputing single professions."""

    async def test_counters_match_live_counts(
        self, tracker, profession, professional_repo, curriculum_repo, job_offer_repo, now
    ):
        """Test that the counters match the live counts after a recompute."""
        for _ in range(3):
            await _curriculum(professional_repo, curriculum_repo, [profession.id], now)
        await _curriculum(professional_repo, curriculum_repo, [profession.id], now, active=False)
        await _curriculum(professional_repo, curriculum_repo, [profession.id], now, owner_active=False)
        await _curriculum(professional_repo, curriculum_repo, [uuid4()], now)
        for _ in range(2):
            await job_offer_repo.create(make_job_offer(now, [profession.id]))
        await job_offer_repo.create(make_job_offer(now, [profession.id], is_active=False))

        updated = await tracker.recompute(profession.id)

        assert updated.registered_professionals == 3
        assert updated.active_job_offers == 2
        assert updated.last_updated == now

    async def test_unknown_profession_raises_not_found(self, tracker):
        """Test that a missing profession raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await tracker.recompute(uuid4())

    async def test_recompute_many_skips_repeats(self, tracker, profession):
        """Test that repeated ids are recomputed once."""
        updated = await tracker.recompute_many([profession.id, profession.id])
        assert [p.id for p in updated] == [profession.id]


class TestRecomputeAll:
    """Test the sweep over every active profession."""

    async def test_failure_is_skipped(
        self, profession_repo, professional_repo, job_offer_repo, clock, now
    ):
        """Test that a failing profession is reported and the others are updated."""
        professions = [
            await profession_repo.create(make_profession(name, code))
            for name, code in (("Architect", "ARCH"), ("Bricklayer", "BRCK"), ("Carpenter", "CARP"))
        ]
        broken = professions[1]
        for profession in professions:
            await job_offer_repo.create(make_job_offer(now, [profession.id]))

        class BrokenCountRepository(InMemoryCurriculumRepository):
            async def count_registered(self, profession_id):
                if profession_id == broken.id:
                    raise RuntimeError("count query failed")
                return await super().count_registered(profession_id)

        tracker = ProfessionDemandTracker(
            profession_repo, BrokenCountRepository(professional_repo), job_offer_repo, clock=clock
        )

        report = await tracker.recompute_all()

        assert [p.id for p in report.updated] == [professions[0].id, professions[2].id]
        assert report.failed == [broken.id]
        assert (await profession_repo.get_by_id(professions[0].id)).active_job_offers == 1
        assert (await profession_repo.get_by_id(professions[2].id)).active_job_offers == 1
        assert (await profession_repo.get_by_id(broken.id)).active_job_offers == 0

    async def test_inactive_professions_are_not_swept(self, tracker, profession, profession_repo):
        """Test that inactive professions are left out of the sweep."""
        await profession_repo.create(make_profession("Lamplighter", "LAMP", is_active=False))
        report = await tracker.recompute_all()
        assert [p.id for p in report.updated] == [profession.id]


class TestAssociationUseCases:
    """Every association change refreshes the affected profession."""

    @pytest.fixture
    async def curriculum(self, professional_repo, curriculum_repo, now):
        return await _curriculum(professional_repo, curriculum_repo, [], now)

    async def _registered(self, profession_repo, profession_id):
        return (await profession_repo.get_by_id(profession_id)).registered_professionals

    async def test_add_and_remove_profession(
        self, curriculum, profession, curriculum_repo, profession_repo, tracker, clock
    ):
        """Test that linking and unlinking professions refresh the counters."""
        add = AddCurriculumProfessionUseCase(curriculum_repo, profession_repo, tracker, clock=clock)
        remove = RemoveCurriculumProfessionUseCase(curriculum_repo, tracker, clock=clock)

        updated = await add.execute(curriculum.id, profession.id, experience_years=5)
        assert updated.has_profession(profession.id)
        assert await self._registered(profession_repo, profession.id) == 1

        again = await add.execute(curriculum.id, profession.id)
        assert len(again.professions) == 1

        roofer = await profession_repo.create(make_profession("Roofer", "ROOF"))
        await add.execute(curriculum.id, roofer.id)

        await remove.execute(curriculum.id, profession.id)
        assert await self._registered(profession_repo, profession.id) == 0
        assert await self._registered(profession_repo, roofer.id) == 1

        with pytest.raises(NotFoundError):
            await remove.execute(curriculum.id, profession.id)

    async def test_remove_last_profession_raises_error(
        self, curriculum, profession, curriculum_repo, profession_repo, tracker, clock
    ):
        """Test that the only link of a curriculum is kept and still counted."""
        add = AddCurriculumProfessionUseCase(curriculum_repo, profession_repo, tracker, clock=clock)
        remove = RemoveCurriculumProfessionUseCase(curriculum_repo, tracker, clock=clock)
        await add.execute(curriculum.id, profession.id)

        with pytest.raises(ValidationError):
            await remove.execute(curriculum.id, profession.id)

        stored = await curriculum_repo.get_by_id(curriculum.id)
        assert stored.profession_ids == [profession.id]
        assert await self._registered(profession_repo, profession.id) == 1

    async def test_add_inactive_profession_raises_error(
        self, curriculum, curriculum_repo, profession_repo, tracker, clock
    ):
        """Test that linking an inactive profession raises ValidationError."""
        retired = await profession_repo.create(make_profession("Lamplighter", "LAMP", is_active=False))
        add = AddCurriculumProfessionUseCase(curriculum_repo, profession_repo, tracker, clock=clock)
        with pytest.raises(ValidationError):
            await add.execute(curriculum.id, retired.id)

    async def test_add_to_unknown_curriculum_raises_error(
        self, profession, curriculum_repo, profession_repo, tracker, clock
    ):
        """Test that linking to a missing curriculum raises NotFoundError."""
        add = AddCurriculumProfessionUseCase(curriculum_repo, profession_repo, tracker, clock=clock)
        with pytest.raises(NotFoundError):
            await add.execute(uuid4(), profession.id)

    async def test_professional_deactivation(
        self, profession, professional_repo, curriculum_repo, profession_repo, tracker, clock, now
    ):
        """Test that deactivating a professional refreshes their professions."""
        curriculum = await _curriculum(professional_repo, curriculum_repo, [profession.id], now)
        await tracker.recompute(profession.id)
        use_case = SetProfessionalActiveUseCase(
            professional_repo, curriculum_repo, tracker, clock=clock
        )

        professional = await use_case.execute(curriculum.professional_id, False)

        assert professional.is_active is False
        assert await self._registered(profession_repo, profession.id) == 0

        await use_case.execute(curriculum.professional_id, True)
        assert await self._registered(profession_repo, profession.id) == 1

    async def test_curriculum_deactivation(
        self, profession, professional_repo, curriculum_repo, profession_repo, tracker, clock, now
    ):
        """Test that deactivating a curriculum refreshes its professions."""
        curriculum = await _curriculum(professional_repo, curriculum_repo, [profession.id], now)
        await tracker.recompute(profession.id)
        use_case = SetCurriculumActiveUseCase(curriculum_repo, tracker, clock=clock)

        updated = await use_case.execute(curriculum.id, False)

        assert updated.is_active is False
        assert await self._registered(profession_repo, profession.id) == 0

    async def test_unknown_professional_raises_error(
        self, professional_repo, curriculum_repo, tracker, clock
    ):
        """Test that activating a missing professional raises NotFoundError."""
        use_case = SetProfessionalActiveUseCase(
            professional_repo, curriculum_repo, tracker, clock=clock
        )
        with pytest.raises(NotFoundError):
            await use_case.execute(uuid4(), False)
