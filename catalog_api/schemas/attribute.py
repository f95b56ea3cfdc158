"""Pydantic schemas for Attribute."""

from catalog_api.schemas.base import CatalogModel


class AttributeBase(CatalogModel):
    """Base attribute schema with common fields."""

    attribute_name: str | None = None
    attribute_value: str | None = None


class AttributeCreate(AttributeBase):
    """Schema for creating an attribute."""

    pass


class AttributeUpdate(AttributeBase):
    """Schema for updating an attribute."""

    pass


class AttributeResponse(AttributeBase):
    """Schema for attribute response."""

    id: int
