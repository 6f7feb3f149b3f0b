# btcrpc/main.py

"""FastAPI Application Entry Point

Read-only introspection service over the per-version method tables:
- Router registration
- Startup/shutdown logging
- Root endpoint with basic info
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from btcrpc.core.config import Settings, settings
from btcrpc.core.logging import setup_logging
from btcrpc.routes import health, surface
from btcrpc.services import resolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Loads every version's method table up front so a broken table fails
    startup instead of the first request.
    """
    config: Settings = app.state.settings
    logger.info("=" * 60)
    logger.info(f"Starting {config.APP_NAME} {config.VERSION}")
    logger.info("=" * 60)
    logger.info(f"Environment: {config.ENVIRONMENT}")
    logger.info(f"Daemon: {config.RPC_URL} (schema v{config.DAEMON_VERSION})")

    for version in resolver.SUPPORTED_VERSIONS:
        table = resolver.method_table(version)
        logger.info(f"Loaded v{version} method table ({len(table)} methods)")

    logger.info("Application startup complete")

    yield

    logger.info(f"Shutting down {config.APP_NAME}...")


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: Settings (defaults to module settings)

    Returns:
        Configured FastAPI app
    """
    config = config or settings
    setup_logging(config)

    app = FastAPI(
        title="btcrpc",
        description="Typed, version-aware interface over the bitcoind JSON-RPC API",
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs" if config.ENVIRONMENT == "development" else None,
        redoc_url="/redoc" if config.ENVIRONMENT == "development" else None
    )
    app.state.settings = config

    @app.get("/")
    async def root():
        """
        Root endpoint with basic info

        Returns:
            API information
        """
        return {
            "name": config.APP_NAME,
            "version": config.VERSION,
            "supported_versions": list(resolver.SUPPORTED_VERSIONS),
            "default_version": config.DAEMON_VERSION,
            "endpoints": {
                "versions": "/versions",
                "methods": "/versions/{version}/methods",
                "method": "/versions/{version}/methods/{name}",
                "health": "/health",
                "docs": "/docs" if config.ENVIRONMENT == "development" else None
            },
            "status": "running"
        }

    app.include_router(health.router)
    app.include_router(surface.router)
    return app


app = create_app()


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "btcrpc.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower()
    )
