"""Page analysis endpoint."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from analyzers.seo import SEOAnalyzer
from api.dependencies import get_http_transport
from api.schemas import PageAnalysisRequest, PageMetricsResponse
from config import Settings, get_settings
from errors import SignalboardError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo", tags=["SEO"])


@router.post(
    "/analyze",
    response_model=PageMetricsResponse,
    summary="Analyze a page",
    description="Fetch one page and score its on-page SEO signals.",
)
async def analyze_page(
    request: PageAnalysisRequest,
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport),
) -> PageMetricsResponse:
    """Run the full page analysis and return scores and recommendations."""
    analyzer = SEOAnalyzer(settings, transport=transport)
    try:
        metrics = await analyzer.analyze(request.url)
    except SignalboardError as e:
        logger.error(f"SEO analysis failed for {request.url}: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return PageMetricsResponse.model_validate(metrics)
