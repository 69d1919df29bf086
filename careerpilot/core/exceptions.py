"""Custom exceptions for the application."""

from fastapi import HTTPException, status


class CareerPilotError(Exception):
    """Base exception for application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(CareerPilotError):
    """Raised on bad or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStatusError(ValidationError):
    """Raised when a status value is not part of the pipeline."""

    def __init__(self, value: object):
        self.value = value
        super().__init__("Invalid status")


class NotFoundError(CareerPilotError):
    """Raised when a referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class JobNotFoundError(NotFoundError):
    """Raised when a job posting cannot be resolved."""

    def __init__(self, job_id: str):
        self.job_id = job_id
        super().__init__("Job not found")


class ApplicationNotFoundError(NotFoundError):
    """Raised when an application record cannot be resolved."""

    def __init__(self, application_id: str):
        self.application_id = application_id
        super().__init__("Application not found")


class ForbiddenError(CareerPilotError):
    """Raised when the caller does not own the resource."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(CareerPilotError):
    """Raised when a write would break a uniqueness rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateApplicationError(ConflictError):
    """Raised when the user already tracks an application for the job."""

    def __init__(self, user_id: str, job_id: str):
        self.user_id = user_id
        self.job_id = job_id
        super().__init__("Application for this job already exists")


class DependencyError(CareerPilotError):
    """Raised when storage or a joined lookup fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def unauthorized_exception(detail: str = "Not authenticated") -> HTTPException:
    """Return a 401 Unauthorized exception."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )
