"""Signalboard API - SEO and YouTube analytics."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health_router, seo_router, youtube_router
from config import get_settings

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Code before `yield` runs on startup.
    Code after `yield` runs on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    if not settings.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; YouTube endpoints will fail")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="Signalboard API",
    description="On-page SEO analysis and YouTube channel analytics.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS (adjust origins for production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api/v1")
app.include_router(seo_router, prefix="/api/v1")
app.include_router(youtube_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    """Point clients at the API docs."""
    return {
        "service": "Signalboard API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
