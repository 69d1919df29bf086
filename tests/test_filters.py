"""Tests for job listing filtering logic."""

from careerpilot.models.job import JobPosting
from careerpilot.utils.filters import JobFilter


def _job(**overrides) -> JobPosting:
    fields = {
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "salary": "$90,000 - $110,000",
        "type": "Full-time",
        "experience": "Mid Level",
        "description": "Python services",
        "skills": ["Python", "Django"],
        "posted_by": "user-alice",
    }
    fields.update(overrides)
    return JobPosting(**fields)


class TestJobFilter:
    """Tests for JobFilter class."""

    def test_no_criteria_passes(self):
        job_filter = JobFilter()
        assert job_filter.conditions() == []
        assert job_filter.should_include(_job()) == (True, "Passed all filters")

    def test_blank_search_ignored(self):
        assert JobFilter(search="   ").search is None

    def test_search_matches_title_company_or_skill(self):
        assert JobFilter(search="backend").should_include(_job())[0] is True
        assert JobFilter(search="ACME").should_include(_job())[0] is True
        assert JobFilter(search="djan").should_include(_job())[0] is True

    def test_search_no_match(self):
        include, reason = JobFilter(search="rust").should_include(_job())
        assert include is False
        assert "rust" in reason

    def test_salary_range(self):
        job_filter = JobFilter(salary="95-105")
        assert job_filter.salary_range == (95000, 105000)
        assert job_filter.should_include(_job())[0] is True

    def test_salary_outside_range(self):
        include, reason = JobFilter(salary="20-40").should_include(_job())
        assert include is False
        assert "outside" in reason

    def test_salary_missing(self):
        include, reason = JobFilter(salary="20-40").should_include(_job(salary=""))
        assert include is False
        assert reason == "Salary not specified"

    def test_sql_conditions(self):
        job_filter = JobFilter(job_type="Contract", experience="Senior Level", location="EU")
        assert len(job_filter.conditions()) == 3
