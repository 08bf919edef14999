"""Pydantic schemas generated from resource descriptors."""

from datetime import datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, create_model

from .resources import Resource


class PayloadBase(BaseModel):
    """Base for create/update request bodies. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")


class ReadBase(BaseModel):
    """Base for rows rendered in responses."""

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ResourceSchemas(NamedTuple):
    payload: type[PayloadBase]
    read: type[ReadBase]


def _class_name(resource: Resource) -> str:
    return resource.display_name.replace(" ", "")


def build_schemas(resource: Resource) -> ResourceSchemas:
    """Build the request and response models for ``resource``.

    Every payload field is optional at the schema level; required fields are
    enforced by the repository on create so that updates may be partial.
    """
    name = _class_name(resource)
    payload_fields: dict[str, Any] = {f: (str | None, None) for f in resource.mutable_fields}
    read_fields: dict[str, Any] = {f: (str, "") for f in resource.mutable_fields}

    payload = create_model(f"{name}Payload", __base__=PayloadBase, **payload_fields)
    read = create_model(f"{name}Read", __base__=ReadBase, **read_fields)
    return ResourceSchemas(payload=payload, read=read)


def dump_row(schemas: ResourceSchemas, row: Any) -> dict[str, Any]:
    """Render an ORM row as a JSON-compatible dict."""
    return schemas.read.model_validate(row).model_dump(mode="json")
