"""Product API endpoints."""

from catalog_api.api.resource import ResourceSpec, build_resource_router
from catalog_api.models.product import Product
from catalog_api.schemas.product import ProductCreate, ProductUpdate, ProductResponse

router = build_resource_router(
    ResourceSpec(
        model=Product,
        create_schema=ProductCreate,
        update_schema=ProductUpdate,
        response_schema=ProductResponse,
        label="Product",
    )
)
