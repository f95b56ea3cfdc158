"""Database models."""

from catalog_api.models.database import Base, engine, get_db
from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.models.attribute import Attribute

__all__ = ["Base", "engine", "get_db", "Category", "Product", "Attribute"]
