"""Core application components."""

from careerpilot.core.config import settings
from careerpilot.core.exceptions import CareerPilotError, DependencyError
from careerpilot.core.storage import Base, async_session, get_session, init_models

__all__ = [
    "Base",
    "CareerPilotError",
    "DependencyError",
    "async_session",
    "get_session",
    "init_models",
    "settings",
]
