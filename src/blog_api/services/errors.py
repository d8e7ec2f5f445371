"""Domain errors raised by the service layer.

Each error carries the HTTP status the API surfaces it with; the mapping is
registered once in :mod:`blog_api.main`.
"""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base class for expected, user-facing service failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ServiceError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    """The request clashes with existing state or ownership."""

    status_code = status.HTTP_409_CONFLICT


class UnauthorizedError(ServiceError):
    """Credentials or tokens were rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    """The caller is authenticated but may not perform the action."""

    status_code = status.HTTP_403_FORBIDDEN
