"""Response envelopes.

Successful responses are ``{"message": ..., "data": ...}`` (list responses also
echo the ``filter``); errors are ``{"message": ...}``.
"""

from dataclasses import dataclass
from typing import Any


def success_response(message: str, data: Any = None, **extra: Any) -> dict[str, Any]:
    """Create a success envelope.

    Args:
        message: Human readable outcome.
        data: Row, list of rows, or echoed payload.
        **extra: Additional top-level keys, e.g. ``filter``.
    """
    return {"message": message, "data": data, **extra}


def error_response(message: str) -> dict[str, Any]:
    """Create an error envelope."""
    return {"message": message}


@dataclass(frozen=True)
class ResourceMessages:
    """Success messages for one resource's operations."""

    display_name: str

    def listed(self) -> str:
        return f"Successfully Get All {self.display_name}"

    def fetched(self, row_id: int) -> str:
        return f"Successfully Get {self.display_name} By ID : {row_id}"

    def created(self) -> str:
        return f"Successfully Create a {self.display_name}"

    def updated(self, row_id: int) -> str:
        return f"Successfully Update {self.display_name} By ID : {row_id}"
