"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendorlens.api.routers import analyses, health
from vendorlens.core.config import get_settings
from vendorlens.core.logging import setup_logging
from vendorlens.version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    setup_logging()
    yield


app = FastAPI(
    title="VendorLens API",
    description="VendorLens - AI-assisted third-party vendor risk analysis",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware - configured via CORS_ORIGINS environment variable
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(analyses.router, prefix="/api/v1", tags=["Analyses"])
