"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from bootstrap.presentation import routes as bootstrap_routes
from infrastructure.dependencies import create_http_client
from infrastructure.logging import configure_logging
from infrastructure.settings import get_storefront_settings
from infrastructure.version import __version__
from session.presentation import routes as session_routes


@asynccontextmanager
async def shopfront_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - The shared storefront API client (connection pool closed on shutdown)
    """
    settings = get_storefront_settings()
    configure_logging(settings)
    http_client = create_http_client(settings)
    app.state.http_client = http_client

    yield

    await http_client.aclose()


app = FastAPI(
    title="Shopfront",
    description="Multi-tenant storefront rendering service",
    version=__version__,
    lifespan=shopfront_lifespan,
)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


# Include Session bounded context routes
app.include_router(session_routes.router)

# Server-rendered pages last: the page route matches every path
app.include_router(bootstrap_routes.router)
