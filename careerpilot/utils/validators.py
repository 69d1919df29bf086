"""Validation logic for job postings."""

import re
from dataclasses import dataclass, field

REQUIRED_JOB_FIELDS = (
    "title",
    "company",
    "location",
    "type",
    "experience",
    "description",
)


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


def normalize_skills(skills: str | list[str] | None) -> list[str]:
    """Accept a comma-separated string or a list, trim, drop blanks."""
    if not skills:
        return []
    if isinstance(skills, str):
        items = skills.split(",")
    else:
        items = skills
    return [item.strip() for item in items if isinstance(item, str) and item.strip()]


def validate_job_fields(fields: dict, partial: bool = False) -> ValidationResult:
    """Check that required job fields are present and not blank."""
    for name in REQUIRED_JOB_FIELDS:
        if name not in fields:
            if partial:
                continue
            return ValidationResult(
                is_valid=False, error="Please provide all required fields"
            )
        value = fields[name]
        if value is None and partial:
            continue
        if not isinstance(value, str) or not value.strip():
            return ValidationResult(
                is_valid=False, error="Please provide all required fields"
            )

    warnings = []
    salary = fields.get("salary")
    if salary and not re.search(r"\d", salary):
        warnings.append("Salary has no numbers and will not count towards analytics")

    return ValidationResult(is_valid=True, warnings=warnings)


def parse_salary_range(text: str) -> tuple[int, int] | None:
    """Parse a '50-100' filter (thousands) into absolute bounds."""
    parts = text.split("-")
    if len(parts) != 2:
        return None

    bounds = []
    for part in parts:
        digits = re.sub(r"[^0-9]", "", part)
        if not digits:
            return None
        bounds.append(int(digits) * 1000)

    low, high = bounds
    if low > high:
        low, high = high, low
    return low, high
