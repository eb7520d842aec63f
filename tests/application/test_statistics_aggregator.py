"""Tests for the statistics aggregator."""

from datetime import timedelta

from domain.entities import Application
from domain.enums import ApplicationStatus, JobOfferStatus, RecordState
from domain.value_objects import ApplicationStats, JobOfferStats

from fakes import make_job_offer, make_professional


class TestApplicationStats:
    """Test application statistics."""

    async def test_empty(self, aggregator):
        """Test statistics with no applications."""
        assert await aggregator.application_stats() == ApplicationStats()

    async def test_counts_and_average_review_time(
        self, aggregator, application_repo, published_offer, now
    ):
        """Test status counts and the average review time."""
        offer_id = published_offer.id
        reviewed_after_two = Application(
            make_professional().id, offer_id,
            status=ApplicationStatus.ACCEPTED,
            applied_at=now - timedelta(days=2),
            reviewed_at=now,
        )
        reviewed_after_four = Application(
            make_professional().id, offer_id,
            status=ApplicationStatus.REJECTED,
            applied_at=now - timedelta(days=4),
            reviewed_at=now,
        )
        pending = Application(make_professional().id, offer_id, applied_at=now)
        deleted = Application(
            make_professional().id, offer_id,
            applied_at=now,
            record_state=RecordState.DELETED,
        )
        for application in (reviewed_after_two, reviewed_after_four, pending, deleted):
            await application_repo.create(application)

        stats = await aggregator.application_stats()

        assert stats == ApplicationStats(
            total=3, pending=1, accepted=1, rejected=1, avg_days_to_review=3.0
        )


class TestJobOfferStats:
    """Test job offer statistics."""

    async def test_counts(self, aggregator, job_offer_repo, now):
        """Test the job offer counts."""
        await job_offer_repo.create(make_job_offer(now))
        await job_offer_repo.create(make_job_offer(now, status=JobOfferStatus.DRAFT))
        await job_offer_repo.create(
            make_job_offer(now, status=JobOfferStatus.CLOSED, is_active=False)
        )
        await job_offer_repo.create(make_job_offer(now, deadline=now - timedelta(days=1)))

        stats = await aggregator.job_offer_stats()

        assert stats == JobOfferStats(total=4, active=3, published=2, expired=1)
