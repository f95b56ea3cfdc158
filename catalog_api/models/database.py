"""Database setup and session management."""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog_api.config import settings

logger = logging.getLogger(__name__)

# Create engine with SQLite-specific settings
connect_args = {}
if settings.database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.database_url, connect_args=connect_args, echo=settings.debug
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Create all database tables."""
    # Import models to ensure they're registered with Base
    from catalog_api.models import category, product, attribute  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def check_connection(bind=None) -> None:
    """Run a trivial query so a bad DATABASE_URL fails at startup.

    Errors propagate to the caller; there is no retry.
    """
    with (bind or engine).connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Database connected!")
