"""Dashboard statistics service."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from careerpilot.core.config import settings
from careerpilot.core.storage import get_session
from careerpilot.models.application import ApplicationRecord
from careerpilot.models.common import utc_now
from careerpilot.schemas.dashboard import (
    DashboardData,
    QuickStats,
    RecentApplication,
    StatCard,
    UpcomingInterview,
)
from careerpilot.services.analytics import round_half_up
from careerpilot.services.stores import ApplicationStore, JobStore
from careerpilot.services.transitions import PENDING_STATUSES, ApplicationStatus

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_POSITION = "Unknown Position"


def percent_change(current: int, previous: int) -> int:
    """Period-over-period change; 100 when growing from nothing."""
    if previous == 0:
        return 100 if current > 0 else 0
    return int(round_half_up((current - previous) / previous * 100))


def _count(records: Sequence[ApplicationRecord], statuses: set[str]) -> int:
    return sum(1 for record in records if record.status in statuses)


def build_stat_cards(
    current: Sequence[ApplicationRecord], previous: Sequence[ApplicationRecord]
) -> list[StatCard]:
    """Stat cards comparing the current window with the one before it."""
    interviewing = {ApplicationStatus.INTERVIEWING.value}
    offer = {ApplicationStatus.OFFER.value}
    pending = {status.value for status in PENDING_STATUSES}

    cards = [
        ("Total Applications", len(current), len(previous), "Briefcase", "blue"),
        (
            "Interviews",
            _count(current, interviewing),
            _count(previous, interviewing),
            "TrendingUp",
            "green",
        ),
        ("Offers", _count(current, offer), _count(previous, offer), "CheckCircle", "purple"),
        ("Pending", _count(current, pending), _count(previous, pending), "Clock", "orange"),
    ]
    return [
        StatCard(
            title=title,
            value=value,
            change=percent_change(value, before),
            icon=icon,
            color=color,
        )
        for title, value, before, icon, color in cards
    ]


class DashboardService:
    """Builds the dashboard page and quick stats."""

    def __init__(
        self,
        applications: ApplicationStore,
        jobs: JobStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.applications = applications
        self.jobs = jobs
        self.clock = clock

    async def get_dashboard(self, user_id: str) -> DashboardData:
        now = self.clock()
        window = timedelta(days=settings.dashboard_window_days)
        current_start = now - window
        previous_start = current_start - window

        current = await self.applications.find_by_user(
            user_id, created_from=current_start
        )
        previous = await self.applications.find_by_user(
            user_id, created_from=previous_start, created_before=current_start
        )
        recent = await self.applications.find_by_user(
            user_id,
            newest_first_by="created_at",
            limit=settings.recent_applications_limit,
        )
        upcoming = await self.applications.find_by_user(
            user_id,
            status=ApplicationStatus.INTERVIEWING.value,
            interview_from=now,
            interview_until=now + timedelta(days=settings.upcoming_interview_days),
            newest_first_by="interview_date",
        )

        return DashboardData(
            stats=build_stat_cards(current, previous),
            recent_applications=[self._recent(record) for record in recent],
            upcoming_interviews=[
                self._interview(record)
                for record in sorted(upcoming, key=lambda r: r.interview_date)
            ],
        )

    async def get_quick_stats(self, user_id: str) -> QuickStats:
        since = self.clock() - timedelta(days=settings.dashboard_window_days)
        return QuickStats(
            applications=await self.applications.count_by_user(
                user_id, created_from=since
            ),
            jobs=await self.jobs.count_posted_by(user_id, created_from=since),
            interviews=await self.applications.count_by_user(
                user_id,
                created_from=since,
                status=ApplicationStatus.INTERVIEWING.value,
            ),
        )

    @staticmethod
    def _recent(record: ApplicationRecord) -> RecentApplication:
        company = record.job.company if record.job else UNKNOWN_COMPANY
        return RecentApplication(
            id=record.id,
            company=company,
            position=record.job.title if record.job else UNKNOWN_POSITION,
            status=record.status,
            date=record.created_at,
            logo=company[:1] or "U",
        )

    @staticmethod
    def _interview(record: ApplicationRecord) -> UpcomingInterview:
        return UpcomingInterview(
            id=record.id,
            company=record.job.company if record.job else UNKNOWN_COMPANY,
            position=record.job.title if record.job else UNKNOWN_POSITION,
            date=record.interview_date,
            time=record.interview_time or "TBD",
            type=record.interview_type or "Interview",
        )


def create_dashboard_service(session: AsyncSession) -> DashboardService:
    """Factory function to create DashboardService."""
    return DashboardService(ApplicationStore(session), JobStore(session))


async def get_dashboard_service(
    session: AsyncSession = Depends(get_session),
) -> DashboardService:
    """Create dashboard service with dependencies."""
    return create_dashboard_service(session)
