"""Tracker service for application records."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from careerpilot.core.auth import ensure_owner
from careerpilot.core.exceptions import (
    ApplicationNotFoundError,
    DuplicateApplicationError,
    JobNotFoundError,
)
from careerpilot.core.storage import get_session
from careerpilot.models.common import utc_now
from careerpilot.models.application import ApplicationRecord
from careerpilot.schemas.tracker import ApplicationResponse, TrackerBoard
from careerpilot.services.stores import ApplicationStore, JobStore
from careerpilot.services.transitions import (
    ApplicationStatus,
    apply_transition,
    initial_fields,
    parse_status,
)

logger = logging.getLogger(__name__)

DETAIL_FIELDS = (
    "interview_date",
    "interview_time",
    "interview_type",
    "interview_location",
    "notes",
    "salary",
)


class TrackerService:
    """Create, list, update and delete a user's tracked applications."""

    def __init__(
        self,
        applications: ApplicationStore,
        jobs: JobStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.applications = applications
        self.jobs = jobs
        self.clock = clock

    async def create(
        self,
        user_id: str,
        job_id: str,
        initial_status: str | None = None,
    ) -> ApplicationRecord:
        """Start tracking a job for the user."""
        status = parse_status(
            ApplicationStatus.SAVED if initial_status is None else initial_status
        )

        if await self.jobs.get(job_id) is None:
            raise JobNotFoundError(job_id)

        if await self.applications.find_one(user_id, job_id) is not None:
            raise DuplicateApplicationError(user_id, job_id)

        record = await self.applications.create(
            user_id=user_id,
            job_id=job_id,
            **initial_fields(status, self.clock()),
        )
        logger.info(
            f"User {user_id} started tracking job {job_id} as {status.value} "
            f"(application {record.id})"
        )
        return record

    async def list(self, user_id: str) -> TrackerBoard:
        """Return the user's applications grouped by status."""
        records = await self.applications.find_by_user(user_id)

        board = TrackerBoard()
        for record in records:
            bucket = getattr(board, record.status, None)
            if bucket is None:
                logger.warning(
                    f"Application {record.id} has unknown status {record.status!r}"
                )
                continue
            bucket.append(ApplicationResponse.model_validate(record))
        return board

    async def update_status(
        self, user_id: str, record_id: str, requested_status: str
    ) -> ApplicationRecord:
        """Move an owned application to ``requested_status``."""
        record = await self._load_owned(user_id, record_id, action="update")
        previous = record.status

        update = apply_transition(record, requested_status, self.clock())
        updated = await self.applications.update(record_id, update.as_values())

        logger.info(
            f"Application {record_id} moved {previous} -> {update.status.value}"
        )
        return updated

    async def update_details(
        self, user_id: str, record_id: str, fields: dict[str, Any]
    ) -> ApplicationRecord:
        """Set scheduling metadata or notes without touching status."""
        await self._load_owned(user_id, record_id, action="update")

        values = {key: value for key, value in fields.items() if key in DETAIL_FIELDS}
        values["updated_at"] = self.clock()
        return await self.applications.update(record_id, values)

    async def delete(self, user_id: str, record_id: str) -> None:
        """Delete an owned application; the job is left alone."""
        await self._load_owned(user_id, record_id, action="delete")
        await self.applications.delete(record_id)
        logger.info(f"Application {record_id} deleted by {user_id}")

    async def _load_owned(
        self, user_id: str, record_id: str, action: str
    ) -> ApplicationRecord:
        record = await self.applications.get(record_id)
        if record is None:
            raise ApplicationNotFoundError(record_id)
        ensure_owner(record.user_id, user_id, action)
        return record


def create_tracker_service(session: AsyncSession) -> TrackerService:
    """Factory function to create TrackerService."""
    return TrackerService(ApplicationStore(session), JobStore(session))


async def get_tracker_service(
    session: AsyncSession = Depends(get_session),
) -> TrackerService:
    """Create tracker service with dependencies."""
    return create_tracker_service(session)
