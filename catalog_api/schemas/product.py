"""Pydantic schemas for Product."""

from catalog_api.schemas.base import CatalogModel


class ProductBase(CatalogModel):
    """Base product schema with common fields."""

    name: str | None = None
    price: float | None = None
    category_id: int | None = None


class ProductCreate(ProductBase):
    """Schema for creating a product."""

    pass


class ProductUpdate(ProductBase):
    """Schema for updating a product."""

    pass


class ProductResponse(ProductBase):
    """Schema for product response."""

    id: int
