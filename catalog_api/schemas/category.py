"""Pydantic schemas for Category."""

from catalog_api.schemas.base import CatalogModel


class CategoryBase(CatalogModel):
    """Base category schema with common fields."""

    name: str | None = None


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""

    pass


class CategoryUpdate(CategoryBase):
    """Schema for updating a category."""

    pass


class CategoryResponse(CategoryBase):
    """Schema for category response."""

    id: int
