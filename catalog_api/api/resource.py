"""Generic CRUD router shared by every entity kind.

Each endpoint makes exactly one storage call. By default a missing record is
not an error: get answers 200 with ``null`` and update/delete always confirm.
``Settings.strict_not_found`` switches those cases to 404.

Handlers are plain functions so FastAPI runs the blocking session calls in
its threadpool.
"""

from dataclasses import dataclass

from fastapi import APIRouter
from pydantic import BaseModel

from catalog_api.dependencies import AppSettings, Storage
from catalog_api.errors import NotFoundError
from catalog_api.models.database import Base
from catalog_api.schemas.base import MessageResponse

ALL_OPERATIONS = frozenset({"create", "list", "get", "update", "delete"})


@dataclass(frozen=True)
class ResourceSpec:
    """Everything the router factory needs to know about one entity kind."""

    model: type[Base]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    label: str
    operations: frozenset[str] = ALL_OPERATIONS


def build_resource_router(spec: ResourceSpec) -> APIRouter:
    """Build an APIRouter exposing the requested CRUD operations for spec.model."""
    unknown = spec.operations - ALL_OPERATIONS
    if unknown:
        raise ValueError(f"Unknown operations for {spec.label}: {sorted(unknown)}")

    router = APIRouter()
    model = spec.model
    label = spec.label
    CreateSchema = spec.create_schema
    UpdateSchema = spec.update_schema
    ResponseSchema = spec.response_schema

    if "create" in spec.operations:

        @router.post("", response_model=ResponseSchema, summary=f"Create {label}")
        def create(body: CreateSchema, storage: Storage):
            return storage.insert(model, body.model_dump())

    if "list" in spec.operations:

        @router.get("", response_model=list[ResponseSchema], summary=f"List {label} records")
        def list_all(storage: Storage):
            return storage.find_all(model)

    if "get" in spec.operations:

        @router.get(
            "/{record_id}",
            response_model=ResponseSchema | None,
            summary=f"Get {label} by ID (null when absent)",
        )
        def get(record_id: int, storage: Storage, settings: AppSettings):
            record = storage.find_by_key(model, record_id)
            if record is None and settings.strict_not_found:
                raise NotFoundError(label, record_id)
            return record

    if "update" in spec.operations:

        @router.put("/{record_id}", response_model=MessageResponse, summary=f"Update {label}")
        def update(
            record_id: int, body: UpdateSchema, storage: Storage, settings: AppSettings
        ):
            affected = storage.update_where(
                model, record_id, body.model_dump(exclude_unset=True)
            )
            if not affected and settings.strict_not_found:
                raise NotFoundError(label, record_id)
            return {"message": f"{label} updated"}

    if "delete" in spec.operations:

        @router.delete("/{record_id}", response_model=MessageResponse, summary=f"Delete {label}")
        def delete(record_id: int, storage: Storage, settings: AppSettings):
            affected = storage.delete_where(model, record_id)
            if not affected and settings.strict_not_found:
                raise NotFoundError(label, record_id)
            return {"message": f"{label} deleted"}

    return router
