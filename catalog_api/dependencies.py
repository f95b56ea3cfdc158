"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog_api.config import Settings, get_settings
from catalog_api.models.database import get_db
from catalog_api.storage import SqlAlchemyStorage, Storage as StorageInterface


def get_storage(db: Annotated[Session, Depends(get_db)]) -> StorageInterface:
    """Dependency that provides the storage bound to this request's session."""
    return SqlAlchemyStorage(db)


# Type aliases for common dependencies
Storage = Annotated[StorageInterface, Depends(get_storage)]
AppSettings = Annotated[Settings, Depends(get_settings)]
