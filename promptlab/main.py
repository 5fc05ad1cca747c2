"""Main FastAPI application.

Entry point for the portfolio valuation service.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from promptlab.api.dependencies import get_settings
from promptlab.api.responses import register_exception_handlers
from promptlab.api.routes import valuation
from promptlab.shared.logging_config import configure_logging

# Configure logging
settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(
        f"Currency: {settings.default_currency} "
        f"({settings.currency_decimal_places} decimal places)"
    )
    yield
    logger.info(f"Shutting down {settings.api_title}")


app = FastAPI(
    lifespan=lifespan,
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Valuation", "description": "Holding and portfolio valuation endpoints"},
        {"name": "Health & Status", "description": "Service health check and status endpoints"},
    ],
)

# Note: allow_credentials=False is required when using allow_origins=["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(valuation.router)


@app.get("/", include_in_schema=False)
async def root():
    """Redirect root to API documentation."""
    return RedirectResponse(url="/docs")


@app.get(
    "/health",
    status_code=200,
    summary="Service health check",
    tags=["Health & Status"],
)
async def health_check():
    """Service health check endpoint.

    Returns:
        Dictionary containing service health status and metadata
    """
    return {
        "status": "healthy",
        "service": settings.api_title,
        "version": settings.api_version,
        "currency": settings.default_currency,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "promptlab.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
