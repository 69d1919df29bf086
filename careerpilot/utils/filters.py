"""Job listing filtering logic."""

from sqlalchemy import func

from careerpilot.models.job import JobPosting
from careerpilot.services.analytics import parse_salary
from careerpilot.utils.validators import parse_salary_range


class JobFilter:
    """Filters for the public job listing.

    Exact-match and substring criteria become SQL conditions; free-text search
    over skills and the salary range need parsing and run in Python.
    """

    def __init__(
        self,
        search: str | None = None,
        job_type: str | None = None,
        location: str | None = None,
        experience: str | None = None,
        salary: str | None = None,
    ):
        self.search = search.strip().lower() if search and search.strip() else None
        self.job_type = job_type
        self.location = location
        self.experience = experience
        self.salary_range = parse_salary_range(salary) if salary else None

    def conditions(self) -> list:
        """SQL conditions for the criteria the database can evaluate."""
        conditions = []
        if self.job_type:
            conditions.append(JobPosting.type == self.job_type)
        if self.experience:
            conditions.append(JobPosting.experience == self.experience)
        if self.location:
            conditions.append(
                func.lower(JobPosting.location).contains(self.location.lower())
            )
        return conditions

    def should_include(self, job: JobPosting) -> tuple[bool, str]:
        """Determine if the job passes the in-memory criteria."""
        if self.search and not self._matches_search(job):
            return False, f"No match for '{self.search}'"

        if self.salary_range:
            low, high = self.salary_range
            value = parse_salary(job.salary)
            if value is None:
                return False, "Salary not specified"
            if not low <= value <= high:
                return False, f"Salary {value:.0f} outside {low}-{high}"

        return True, "Passed all filters"

    def _matches_search(self, job: JobPosting) -> bool:
        if self.search in (job.title or "").lower():
            return True
        if self.search in (job.company or "").lower():
            return True
        return any(self.search in skill.lower() for skill in job.skills or [])
