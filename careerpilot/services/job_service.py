"""Job posting service."""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from careerpilot.core.auth import CurrentUser, ensure_owner
from careerpilot.core.exceptions import JobNotFoundError, ValidationError
from careerpilot.core.storage import get_session
from careerpilot.models.job import JobPosting
from careerpilot.services.stores import JobStore
from careerpilot.utils.filters import JobFilter
from careerpilot.utils.validators import normalize_skills, validate_job_fields

logger = logging.getLogger(__name__)


def _logo_for(company: str) -> str:
    return company.strip()[:1].upper()


class JobService:
    """Post, browse, edit and bookmark job listings."""

    def __init__(self, jobs: JobStore):
        self.jobs = jobs

    async def create(self, user: CurrentUser, fields: dict[str, Any]) -> JobPosting:
        validation = validate_job_fields(fields)
        if not validation.is_valid:
            raise ValidationError(validation.error)
        for warning in validation.warnings:
            logger.warning(f"Job '{fields['title']}': {warning}")

        job = await self.jobs.create(
            title=fields["title"].strip(),
            company=fields["company"].strip(),
            location=fields["location"].strip(),
            salary=fields.get("salary") or "",
            type=fields["type"],
            experience=fields["experience"],
            description=fields["description"],
            skills=normalize_skills(fields.get("skills")),
            posted_by=user.id,
            logo=_logo_for(fields["company"]),
        )
        logger.info(f"Job {job.id} posted by {user.id}: {job.title} at {job.company}")
        return job

    async def list(self, job_filter: JobFilter) -> list[JobPosting]:
        """Jobs matching the filter, newest first."""
        candidates: Sequence[JobPosting] = await self.jobs.find(
            *job_filter.conditions()
        )

        results = []
        for job in candidates:
            include, reason = job_filter.should_include(job)
            if include:
                results.append(job)
            else:
                logger.debug(f"Job {job.id} filtered out: {reason}")
        return results

    async def get(self, job_id: str) -> JobPosting:
        job = await self.jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def update(
        self, user: CurrentUser, job_id: str, fields: dict[str, Any]
    ) -> JobPosting:
        """Edit a job; only its poster or an admin may do so."""
        job = await self.get(job_id)
        ensure_owner(job.posted_by, user, "update", resource="job", allow_admin=True)

        validation = validate_job_fields(fields, partial=True)
        if not validation.is_valid:
            raise ValidationError(validation.error)

        values = {key: value for key, value in fields.items() if value is not None}
        if "skills" in fields:
            values["skills"] = (
                normalize_skills(fields["skills"]) if fields["skills"] else job.skills
            )
        if values.get("company"):
            values["logo"] = _logo_for(values["company"])

        if not values:
            return job
        return await self.jobs.update(job_id, values)

    async def delete(self, user: CurrentUser, job_id: str) -> None:
        """Delete a job; tracked applications keep their reference."""
        job = await self.get(job_id)
        ensure_owner(job.posted_by, user, "delete", resource="job", allow_admin=True)
        await self.jobs.delete(job_id)
        logger.info(f"Job {job_id} deleted by {user.id}")

    async def toggle_save(self, user: CurrentUser, job_id: str) -> JobPosting:
        """Bookmark the job for the caller, or remove the bookmark."""
        job = await self.get(job_id)
        saved_by = list(job.saved_by or [])
        if user.id in saved_by:
            saved_by = [uid for uid in saved_by if uid != user.id]
        else:
            saved_by.append(user.id)
        return await self.jobs.update(job_id, {"saved_by": saved_by})


def create_job_service(session: AsyncSession) -> JobService:
    """Factory function to create JobService."""
    return JobService(JobStore(session))


async def get_job_service(
    session: AsyncSession = Depends(get_session),
) -> JobService:
    """Create job service with dependencies."""
    return create_job_service(session)
