"""Resource routers - list, get, create, update and delete for each descriptor."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..dependencies import get_app_settings, get_async_session
from ..envelope import ResourceMessages, success_response
from ..logging_config import bind_request_context
from ..repository import ResourceRepository
from ..resources import RESOURCES, Resource
from ..schemas import build_schemas, dump_row


def build_router(resource: Resource) -> APIRouter:
    """Build the five CRUD endpoints for ``resource`` under ``/{resource.name}``."""
    schemas = build_schemas(resource)
    messages = ResourceMessages(resource.display_name)
    collection_path = f"/{resource.name}"
    item_path = f"/{resource.name}/{{row_id}}"

    router = APIRouter(tags=[resource.name])

    async def get_repository(
        db: AsyncSession = Depends(get_async_session),
        settings: Settings = Depends(get_app_settings),
    ) -> ResourceRepository:
        bind_request_context(resource=resource.name)
        return ResourceRepository(resource, db, timeout=settings.query_timeout_seconds)

    @router.get(collection_path, name=f"list_{resource.name}")
    async def list_rows(
        search: str = "",
        repo: ResourceRepository = Depends(get_repository),
    ) -> dict:
        """List rows, optionally only those whose filter field contains ``search``."""
        rows = await repo.list(search)
        return success_response(
            messages.listed(), [dump_row(schemas, row) for row in rows], filter=search
        )

    @router.get(item_path, name=f"get_{resource.name}")
    async def get_row(row_id: int, repo: ResourceRepository = Depends(get_repository)) -> dict:
        """Get a row by ID."""
        row = await repo.get(row_id)
        return success_response(messages.fetched(row_id), dump_row(schemas, row))

    @router.post(
        collection_path, name=f"create_{resource.name}", status_code=status.HTTP_201_CREATED
    )
    async def create_row(
        payload: schemas.payload,
        repo: ResourceRepository = Depends(get_repository),
    ) -> dict:
        """Create a row."""
        row = await repo.create(payload.model_dump(exclude_unset=True))
        return success_response(messages.created(), dump_row(schemas, row))

    @router.put(item_path, name=f"update_{resource.name}")
    async def update_row(
        row_id: int,
        payload: schemas.payload,
        repo: ResourceRepository = Depends(get_repository),
    ) -> dict:
        """Update a row. Responds with the submitted fields rather than the stored row."""
        data = await repo.update(row_id, payload.model_dump(exclude_unset=True))
        return success_response(messages.updated(row_id), data)

    @router.delete(
        item_path, name=f"delete_{resource.name}", status_code=status.HTTP_204_NO_CONTENT
    )
    async def delete_row(row_id: int, repo: ResourceRepository = Depends(get_repository)) -> None:
        """Delete a row. Deleting a missing row still succeeds."""
        await repo.delete(row_id)

    return router


routers: list[APIRouter] = [build_router(resource) for resource in RESOURCES]
