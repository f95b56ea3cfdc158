"""API routers."""

from catalog_api.api import categories, products, attributes

__all__ = ["categories", "products", "attributes"]
