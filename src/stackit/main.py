# src/stackit/main.py
"""Main entry point for the StackIt application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from stackit.api.v1 import (
    answers_router,
    auth_router,
    notifications_router,
    questions_router,
    votes_router,
)
from stackit.core.errors import StackItError, UnavailableError
from stackit.core.settings import settings
from stackit.db.session import SessionLocal, create_tables

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Internal server error"

# Initialize FastAPI app
app = FastAPI(
    title="StackIt API",
    description="Question and answer forum API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(questions_router, prefix="/api/v1")
app.include_router(answers_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(notifications_router, prefix="/api/v1")


@app.exception_handler(StackItError)
async def stackit_error_handler(request: Request, exc: StackItError) -> JSONResponse:
    """Translate domain errors into JSON responses.

    Client errors carry their explanatory message; server-side failures are
    logged and reported opaquely.
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": GENERIC_SERVER_ERROR, "code": exc.code},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log unexpected store failures and hide their details from clients."""
    logger.error(
        "Database error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    code = "unavailable" if isinstance(exc, OperationalError) else "database_error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_SERVER_ERROR, "code": code},
    )


@app.on_event("startup")
async def on_startup() -> None:
    create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)


def check_database() -> None:
    """Run a trivial query, raising ``UnavailableError`` if the store is down."""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
    except OperationalError as err:
        raise UnavailableError("Database unavailable") from err


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service and its database are up."""
    check_database()
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "StackIt API",
        "version": settings.app_version,
        "description": "Question and answer forum API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("stackit.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
