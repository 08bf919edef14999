"""Generic CRUD repository over one resource descriptor."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from .exceptions import NotFound, ResourceError, StoreUnavailable, ValidationError
from .logging_config import get_logger
from .models import MAX_ROW_ID, Base
from .resources import Resource

logger = get_logger(__name__)


class ResourceRepository:
    """List, get, create, update and delete rows of one resource.

    The repository only touches the descriptor's own columns, so several
    resources can share one physical table. Every datastore round-trip runs
    under ``timeout`` seconds; failures and missed deadlines surface as
    ``StoreUnavailable``.
    """

    def __init__(self, resource: Resource, session: AsyncSession, timeout: float | None = None):
        self.resource = resource
        self.session = session
        self.timeout = timeout

    @property
    def model(self) -> type[Base]:
        return self.resource.model

    @staticmethod
    def _storable(row_id: int) -> bool:
        """Whether ``row_id`` fits the primary key column at all."""
        return 1 <= row_id <= MAX_ROW_ID

    @asynccontextmanager
    async def _store_call(self, operation: str, failure_message: str) -> AsyncIterator[None]:
        """Apply the request deadline and translate datastore failures."""
        try:
            async with asyncio.timeout(self.timeout):
                yield
        except ResourceError:
            raise
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            logger.error(
                "store_error",
                resource=self.resource.name,
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreUnavailable(failure_message) from e

    async def list(self, search: str = "") -> list[Base]:
        """Return every row, or only rows whose filter field contains ``search``."""
        name = self.resource.display_name
        query = select(self.model).order_by(self.model.id)
        if search:
            column = getattr(self.model, self.resource.filter_field)
            query = query.where(column.contains(search, autoescape=True))

        async with self._store_call("list", f"Failed to Get All {name}"):
            result = await self.session.execute(query)
            return list(result.scalars().all())

    async def get(self, row_id: int) -> Base:
        """Return the row with primary key ``row_id``.

        Raises:
            NotFound: If no such row exists.
        """
        name = self.resource.display_name
        if not self._storable(row_id):
            raise NotFound(f"{name} not found")
        async with self._store_call("get", f"Failed to Get {name} By ID"):
            row = await self.session.get(self.model, row_id)
        if row is None:
            raise NotFound(f"{name} not found")
        return row

    async def create(self, fields: dict[str, Any]) -> Base:
        """Insert a row from ``fields`` and return it with its assigned id.

        Mutable fields that are absent are stored as empty strings.

        Raises:
            ValidationError: If a required field is absent.
        """
        missing = [f for f in self.resource.required_fields if fields.get(f) is None]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        values = {f: fields.get(f) or "" for f in self.resource.mutable_fields}
        row = self.model(**values)

        async with self._store_call("create", f"Failed to Create {self.resource.display_name}"):
            self.session.add(row)
            await self.session.commit()
            await self.session.refresh(row)

        logger.debug("resource_created", resource=self.resource.name, id=row.id)
        return row

    async def update(self, row_id: int, fields: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the supplied mutable fields of row ``row_id``.

        The existence check and the write are separate round-trips, so a
        concurrent delete between them is not detected.

        Returns:
            The supplied fields plus ``id``, not the stored row.

        Raises:
            NotFound: If no such row exists.
        """
        name = self.resource.display_name
        row = await self.get(row_id)

        changes = {
            f: value
            for f, value in fields.items()
            if f in self.resource.mutable_fields and value is not None
        }
        async with self._store_call("update", f"Failed to Update {name} By ID"):
            for f, value in changes.items():
                setattr(row, f, value)
            row.updated_at = func.now()
            await self.session.commit()
            await self.session.refresh(row)

        logger.debug(
            "resource_updated", resource=self.resource.name, id=row_id, fields=sorted(changes)
        )
        return {"id": row_id, **changes}

    async def delete(self, row_id: int) -> None:
        """Delete row ``row_id``. Deleting a missing row is not an error."""
        if not self._storable(row_id):
            return
        name = self.resource.display_name
        async with self._store_call("delete", f"Failed to Delete {name} By ID"):
            result = await self.session.execute(delete(self.model).where(self.model.id == row_id))
            await self.session.commit()

        logger.debug(
            "resource_deleted", resource=self.resource.name, id=row_id, rows=result.rowcount
        )
