"""Pydantic schemas for request/response validation."""

from catalog_api.schemas.base import MessageResponse
from catalog_api.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from catalog_api.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from catalog_api.schemas.attribute import AttributeCreate, AttributeUpdate, AttributeResponse

__all__ = [
    "MessageResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "AttributeCreate",
    "AttributeUpdate",
    "AttributeResponse",
]
