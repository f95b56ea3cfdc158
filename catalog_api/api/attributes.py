"""Attribute API endpoints."""

from catalog_api.api.resource import ResourceSpec, build_resource_router
from catalog_api.models.attribute import Attribute
from catalog_api.schemas.attribute import (
    AttributeCreate,
    AttributeUpdate,
    AttributeResponse,
)

router = build_resource_router(
    ResourceSpec(
        model=Attribute,
        create_schema=AttributeCreate,
        update_schema=AttributeUpdate,
        response_schema=AttributeResponse,
        label="Attribute",
    )
)
