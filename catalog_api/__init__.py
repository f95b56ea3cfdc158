"""Catalog CRUD API: categories, products and attributes over FastAPI + SQLAlchemy."""

__version__ = "1.0.0"
