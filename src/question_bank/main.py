"""Main entry point for the Question Bank application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from question_bank.api.v1 import (
    categories_router,
    companies_router,
    employees_router,
    questions_router,
    votes_router,
)
from question_bank.core.logging_config import configure_logging
from question_bank.core.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)
    yield
    logger.info("%s shutting down", settings.app_name)


# Initialize FastAPI app
app = FastAPI(
    title="Question Bank API",
    description="Administration API for the question bank",
    version=settings.app_version,
    lifespan=lifespan,
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
app.include_router(companies_router, prefix="/api/v1")
app.include_router(employees_router, prefix="/api/v1")
app.include_router(categories_router, prefix="/api/v1")
app.include_router(questions_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Question Bank API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("question_bank.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
