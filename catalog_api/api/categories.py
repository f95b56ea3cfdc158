"""Category API endpoints."""

from catalog_api.api.resource import ResourceSpec, build_resource_router
from catalog_api.models.category import Category
from catalog_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse

router = build_resource_router(
    ResourceSpec(
        model=Category,
        create_schema=CategoryCreate,
        update_schema=CategoryUpdate,
        response_schema=CategoryResponse,
        label="Category",
    )
)
