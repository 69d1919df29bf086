"""Document-style stores over the SQL session.

The services only need find/create/update/delete with simple filters, so the
stores expose exactly that. Storage failures are logged and surfaced as
DependencyError; nothing is retried.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from careerpilot.core.exceptions import (
    ApplicationNotFoundError,
    DependencyError,
    JobNotFoundError,
)
from careerpilot.models.application import ApplicationRecord
from careerpilot.models.job import JobPosting

logger = logging.getLogger(__name__)


class ApplicationStore:
    """Persistence for application records."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self):
        return (
            select(ApplicationRecord)
            .options(selectinload(ApplicationRecord.job))
            .execution_options(populate_existing=True)
        )

    async def get(self, record_id: str) -> ApplicationRecord | None:
        """Load one record with its job, or None."""
        try:
            result = await self.session.execute(
                self._select().where(ApplicationRecord.id == record_id)
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error loading application {record_id}: {e}")
            raise DependencyError("Database error") from e

    async def find_one(self, user_id: str, job_id: str) -> ApplicationRecord | None:
        """Find the record a user holds for a job."""
        try:
            result = await self.session.execute(
                select(ApplicationRecord).where(
                    ApplicationRecord.user_id == user_id,
                    ApplicationRecord.job_id == job_id,
                )
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error checking application for job {job_id}: {e}")
            raise DependencyError("Database error") from e

    async def find_by_user(
        self,
        user_id: str,
        created_from: datetime | None = None,
        created_before: datetime | None = None,
        status: str | None = None,
        interview_from: datetime | None = None,
        interview_until: datetime | None = None,
        newest_first_by: str = "updated_at",
        limit: int | None = None,
    ) -> Sequence[ApplicationRecord]:
        """List a user's records with their jobs joined."""
        query = self._select().where(ApplicationRecord.user_id == user_id)
        if created_from is not None:
            query = query.where(ApplicationRecord.created_at >= created_from)
        if created_before is not None:
            query = query.where(ApplicationRecord.created_at < created_before)
        if status is not None:
            query = query.where(ApplicationRecord.status == status)
        if interview_from is not None:
            query = query.where(ApplicationRecord.interview_date >= interview_from)
        if interview_until is not None:
            query = query.where(ApplicationRecord.interview_date <= interview_until)

        order_column = getattr(ApplicationRecord, newest_first_by)
        query = query.order_by(order_column.desc())
        if limit is not None:
            query = query.limit(limit)

        try:
            result = await self.session.execute(query)
            return result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Database error listing applications for {user_id}: {e}")
            raise DependencyError("Database error") from e

    async def count_by_user(
        self,
        user_id: str,
        created_from: datetime | None = None,
        status: str | None = None,
    ) -> int:
        query = (
            select(func.count())
            .select_from(ApplicationRecord)
            .where(ApplicationRecord.user_id == user_id)
        )
        if created_from is not None:
            query = query.where(ApplicationRecord.created_at >= created_from)
        if status is not None:
            query = query.where(ApplicationRecord.status == status)

        try:
            result = await self.session.execute(query)
            return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error(f"Database error counting applications for {user_id}: {e}")
            raise DependencyError("Database error") from e

    async def create(self, **fields: Any) -> ApplicationRecord:
        """Insert a record and return it with its job loaded."""
        try:
            record = ApplicationRecord(**fields)
            self.session.add(record)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error creating application: {e}")
            raise DependencyError("Database error") from e
        return await self.get(record.id)

    async def update(self, record_id: str, values: dict[str, Any]) -> ApplicationRecord:
        """Merge ``values`` into a record and return the fresh copy."""
        try:
            await self.session.execute(
                update(ApplicationRecord)
                .where(ApplicationRecord.id == record_id)
                .values(**values)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error updating application {record_id}: {e}")
            raise DependencyError("Database error") from e
        record = await self.get(record_id)
        if record is None:
            raise ApplicationNotFoundError(record_id)
        return record

    async def delete(self, record_id: str) -> None:
        try:
            await self.session.execute(
                delete(ApplicationRecord).where(ApplicationRecord.id == record_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error deleting application {record_id}: {e}")
            raise DependencyError("Database error") from e


class JobStore:
    """Persistence for job postings."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, job_id: str) -> JobPosting | None:
        try:
            result = await self.session.execute(
                select(JobPosting)
                .where(JobPosting.id == job_id)
                .execution_options(populate_existing=True)
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Database error loading job {job_id}: {e}")
            raise DependencyError("Database error") from e

    async def find(self, *conditions: Any) -> Sequence[JobPosting]:
        """List jobs matching all SQL ``conditions``, newest first."""
        query = select(JobPosting).order_by(JobPosting.created_at.desc())
        if conditions:
            query = query.where(*conditions)
        try:
            result = await self.session.execute(query)
            return result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Database error listing jobs: {e}")
            raise DependencyError("Database error") from e

    async def count_posted_by(
        self, user_id: str, created_from: datetime | None = None
    ) -> int:
        query = (
            select(func.count())
            .select_from(JobPosting)
            .where(JobPosting.posted_by == user_id)
        )
        if created_from is not None:
            query = query.where(JobPosting.created_at >= created_from)
        try:
            result = await self.session.execute(query)
            return int(result.scalar_one())
        except SQLAlchemyError as e:
            logger.error(f"Database error counting jobs for {user_id}: {e}")
            raise DependencyError("Database error") from e

    async def create(self, **fields: Any) -> JobPosting:
        try:
            job = JobPosting(**fields)
            self.session.add(job)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error creating job: {e}")
            raise DependencyError("Database error") from e
        return await self.get(job.id)

    async def update(self, job_id: str, values: dict[str, Any]) -> JobPosting:
        try:
            await self.session.execute(
                update(JobPosting).where(JobPosting.id == job_id).values(**values)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error updating job {job_id}: {e}")
            raise DependencyError("Database error") from e
        job = await self.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def delete(self, job_id: str) -> None:
        try:
            await self.session.execute(delete(JobPosting).where(JobPosting.id == job_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error deleting job {job_id}: {e}")
            raise DependencyError("Database error") from e
