"""Health check endpoint."""

from fastapi import APIRouter, Depends

from api.schemas import HealthResponse
from config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is running and which integrations are configured.",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return service health status."""
    return HealthResponse(
        youtube_configured=bool(settings.youtube_api_key),
        oauth_configured=bool(
            settings.youtube_oauth_client_id and settings.youtube_oauth_redirect_uri
        ),
    )
