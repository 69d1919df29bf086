"""Analytics service: loads a user's records and aggregates them."""

import logging
from collections.abc import Callable
from datetime import datetime

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from careerpilot.core.config import settings
from careerpilot.core.storage import get_session
from careerpilot.models.common import utc_now
from careerpilot.schemas.analytics import (
    AnalyticsSummary,
    ExportAcknowledgement,
    ExportDownload,
)
from careerpilot.services.analytics import resolve_window, summarize
from careerpilot.services.stores import ApplicationStore

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Produces analytics summaries for a user."""

    def __init__(
        self,
        applications: ApplicationStore,
        clock: Callable[[], datetime] = utc_now,
        top_companies_limit: int = settings.top_companies_limit,
        trend_months: int = settings.trend_months,
    ):
        self.applications = applications
        self.clock = clock
        self.top_companies_limit = top_companies_limit
        self.trend_months = trend_months

    async def get_summary(self, user_id: str, range_tag: str) -> AnalyticsSummary:
        now = self.clock()
        window = resolve_window(range_tag, now)
        records = await self.applications.find_by_user(
            user_id, created_from=window.start
        )
        logger.debug(f"Summarizing {len(records)} applications for {user_id} ({range_tag})")

        return summarize(
            records,
            window,
            now,
            top_companies_limit=self.top_companies_limit,
            trend_months=self.trend_months,
        )

    async def request_export(
        self, user_id: str, range_tag: str, export_format: str
    ) -> ExportAcknowledgement:
        """Acknowledge an export; file rendering happens elsewhere."""
        summary = await self.get_summary(user_id, range_tag)
        export_id = f"export-{int(self.clock().timestamp() * 1000)}"
        logger.info(f"Export {export_id} ({export_format}) requested by {user_id}")

        return ExportAcknowledgement(
            export_id=export_id,
            format=export_format,
            range=range_tag,
            total_applications=summary.metrics.total_applications,
            message="Export request received. Your data will be processed shortly.",
            download_url=f"/analytics/download/{export_id}",
        )

    def get_export(self, user_id: str, export_id: str) -> ExportDownload:
        """Acknowledge a download request; no file is rendered."""
        logger.info(f"Export {export_id} download requested by {user_id}")
        return ExportDownload(
            export_id=export_id,
            message="Export download will be available soon.",
        )


def create_analytics_service(session: AsyncSession) -> AnalyticsService:
    """Factory function to create AnalyticsService."""
    return AnalyticsService(ApplicationStore(session))


async def get_analytics_service(
    session: AsyncSession = Depends(get_session),
) -> AnalyticsService:
    """Create analytics service with dependencies."""
    return create_analytics_service(session)
