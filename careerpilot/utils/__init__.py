"""Utility functions and classes."""

from careerpilot.utils.filters import JobFilter
from careerpilot.utils.validators import (
    ValidationResult,
    normalize_skills,
    parse_salary_range,
    validate_job_fields,
)

__all__ = [
    "JobFilter",
    "ValidationResult",
    "normalize_skills",
    "parse_salary_range",
    "validate_job_fields",
]
