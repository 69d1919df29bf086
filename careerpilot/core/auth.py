"""Caller identity and ownership checks.

Credentials are verified by the gateway in front of this service. It forwards
the verified user id (and optionally a role) as request headers, which are read
here and never re-validated.
"""

from dataclasses import dataclass

from fastapi import Request

from careerpilot.core.config import settings
from careerpilot.core.exceptions import ForbiddenError, unauthorized_exception

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class CurrentUser:
    """Identity attached to the request by the gateway."""

    id: str
    role: str = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def get_current_user(request: Request) -> CurrentUser:
    """Resolve the calling user or fail with 401."""
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        raise unauthorized_exception()

    role = (request.headers.get(settings.user_role_header) or "user").strip().lower()
    return CurrentUser(id=user_id, role=role or "user")


def is_owner(owner_id: str | None, user_id: str) -> bool:
    """Check whether ``user_id`` owns a resource owned by ``owner_id``."""
    return owner_id is not None and str(owner_id) == str(user_id)


def ensure_owner(
    owner_id: str | None,
    user: CurrentUser | str,
    action: str,
    resource: str = "application",
    allow_admin: bool = False,
) -> None:
    """Raise ForbiddenError unless the caller owns the resource."""
    if isinstance(user, CurrentUser):
        if allow_admin and user.is_admin:
            return
        user_id = user.id
    else:
        user_id = user

    if not is_owner(owner_id, user_id):
        raise ForbiddenError(f"Not authorized to {action} this {resource}")
