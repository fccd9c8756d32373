"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, bookmarks, users
from src.config import get_settings
from src.services.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Bookmarks API ({settings.environment})")
    yield


app = FastAPI(
    title="Bookmarks API",
    description="Bookmark manager with email/password accounts and JWT sessions",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(
    _request: Request, exc: ConfigurationError,
) -> JSONResponse:
    """Report server misconfiguration without blaming the client."""
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server configuration error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(bookmarks.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
