# src/company_reviews/main.py
"""Main entry point for the company review application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from company_reviews.api.v1 import (
    auth_router,
    companies_router,
    reviews_router,
    system_router,
    users_router,
    votes_router,
)
from company_reviews.core.logging import configure_logging
from company_reviews.core.settings import settings
from company_reviews.db.session import SessionLocal, create_tables
from company_reviews.scripts.seed import seed_companies

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Company Reviews API",
    description="Browse companies, post reviews and vote on their helpfulness",
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
app.include_router(companies_router, prefix="/api/v1")
app.include_router(reviews_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    if settings.seed_on_startup:
        create_tables()
        with SessionLocal() as db:
            created = seed_companies(db)
        logger.info("Seeded %d companies on startup", created)
    logger.info("%s %s started", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Company review platform API",
        "docs": "/docs",
        "redoc": "/redoc"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("company_reviews.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
