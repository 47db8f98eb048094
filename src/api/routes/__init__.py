"""API route exports."""

from api.routes.health import router as health_router
from api.routes.seo import router as seo_router
from api.routes.youtube import router as youtube_router

__all__ = ["health_router", "seo_router", "youtube_router"]
