"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from catalog_api import __version__
from catalog_api.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
from catalog_api.models.database import check_connection, create_tables
from catalog_api.errors import register_error_handlers
from catalog_api.api import categories, products, attributes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info(f"Server running on port {settings.port}")
    check_connection()
    create_tables()

    yield

    # Shutdown (nothing needed for now)


app = FastAPI(
    title="Catalog CRUD API",
    description="Create, read, update and delete categories, products and attributes",
    version=__version__,
    lifespan=lifespan,
)

register_error_handlers(app)

# Include routers
app.include_router(categories.router, prefix="/categories", tags=["Categories"])
app.include_router(products.router, prefix="/products", tags=["Products"])
app.include_router(attributes.router, prefix="/attributes", tags=["Attributes"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Catalog CRUD API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


def run():
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
