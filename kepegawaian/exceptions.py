"""Errors raised by resource operations.

Each error carries the HTTP status it maps to and the message rendered in the
``{message}`` error envelope.
"""

from fastapi import status


class ResourceError(Exception):
    """Base class for failures of a single resource operation."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BindError(ResourceError):
    """Request body, path or query parameter could not be parsed."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Failed to Bind Input"):
        super().__init__(message)


class ValidationError(ResourceError):
    """A required field is missing from a create request."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ResourceError):
    """No row matches the requested primary key."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreUnavailable(ResourceError):
    """The datastore failed, refused the query or missed the request deadline."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
