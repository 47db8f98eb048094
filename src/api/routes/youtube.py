"""YouTube analytics endpoints."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_http_transport, get_oauth_registry, get_snapshot_store
from api.schemas import (
    ChannelStatsRequest,
    ChannelStatsResponse,
    NicheAnalysisRequest,
    NicheAnalysisResponse,
    NicheListResponse,
    NicheOption,
    OAuthCallbackRequest,
    OAuthFlowResponse,
    OAuthStartResponse,
    ScriptRequest,
    ScriptResponse,
    TagRequest,
    TagsResponse,
    TitleRequest,
    TitlesResponse,
)
from config import Settings, get_settings
from errors import SignalboardError
from youtube.channel import ChannelAnalyzer
from youtube.content import generate_script, generate_tags, generate_titles
from youtube.niche import POPULAR_NICHES, NicheAnalyzer
from youtube.oauth import OAuthFlow, OAuthFlowRegistry
from youtube.snapshots import SnapshotStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/youtube", tags=["YouTube"])


def _http_error(e: SignalboardError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=str(e))


def _flow_response(flow: OAuthFlow) -> OAuthFlowResponse:
    return OAuthFlowResponse(
        state=flow.state_token,
        status=flow.state.value,
        code=flow.code,
        error=flow.error,
    )


@router.post(
    "/channel-stats",
    response_model=ChannelStatsResponse,
    summary="Channel statistics",
    description="Views, subscribers, videos and engagement for a youtube.com/@handle channel.",
)
async def channel_stats(
    request: ChannelStatsRequest,
    settings: Settings = Depends(get_settings),
    snapshots: SnapshotStore = Depends(get_snapshot_store),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport),
) -> ChannelStatsResponse:
    analyzer = ChannelAnalyzer(settings, snapshots=snapshots, transport=transport)
    try:
        stats = await analyzer.analyze(request.channel_url, auth_code=request.auth_code)
    except SignalboardError as e:
        logger.error(f"Channel stats failed for {request.channel_url}: {e}")
        raise _http_error(e)

    return ChannelStatsResponse.model_validate(stats)


@router.get(
    "/niches",
    response_model=NicheListResponse,
    summary="List supported niches",
)
async def list_niches() -> NicheListResponse:
    niches = [NicheOption(value=value, label=label) for value, label in POPULAR_NICHES.items()]
    return NicheListResponse(niches=niches, count=len(niches))


@router.post(
    "/niche-analysis",
    response_model=NicheAnalysisResponse,
    summary="Analyze a niche",
    description="Most viewed channels and videos for a niche, with trends and taglines.",
)
async def niche_analysis(
    request: NicheAnalysisRequest,
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_http_transport),
) -> NicheAnalysisResponse:
    analyzer = NicheAnalyzer(settings, transport=transport)
    try:
        analysis = await analyzer.analyze(request.niche)
    except SignalboardError as e:
        logger.error(f"Niche analysis failed for {request.niche}: {e}")
        raise _http_error(e)

    return NicheAnalysisResponse.model_validate(analysis)


@router.post(
    "/oauth/start",
    response_model=OAuthStartResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start an OAuth flow",
)
async def oauth_start(
    registry: OAuthFlowRegistry = Depends(get_oauth_registry),
) -> OAuthStartResponse:
    """Open a flow and return the consent URL for the popup."""
    try:
        flow = registry.start()
    except SignalboardError as e:
        raise _http_error(e)

    return OAuthStartResponse(
        state=flow.state_token,
        authorization_url=flow.authorization_url,
    )


@router.post(
    "/oauth/callback",
    response_model=OAuthFlowResponse,
    summary="Deliver the OAuth redirect result",
    description="Only the first callback for a flow is honored.",
)
async def oauth_callback(
    request: OAuthCallbackRequest,
    registry: OAuthFlowRegistry = Depends(get_oauth_registry),
) -> OAuthFlowResponse:
    try:
        flow = registry.handle_callback(request.state, code=request.code, error=request.error)
    except SignalboardError as e:
        raise _http_error(e)

    return _flow_response(flow)


@router.delete(
    "/oauth/{state}",
    response_model=OAuthFlowResponse,
    summary="Cancel a pending OAuth flow",
)
async def oauth_cancel(
    state: str,
    registry: OAuthFlowRegistry = Depends(get_oauth_registry),
) -> OAuthFlowResponse:
    try:
        flow = registry.cancel(state)
    except SignalboardError as e:
        raise _http_error(e)

    return _flow_response(flow)


@router.post("/titles", response_model=TitlesResponse, summary="Generate video titles")
async def titles(request: TitleRequest) -> TitlesResponse:
    return TitlesResponse(titles=generate_titles(request.topic, request.style))


@router.post("/tags", response_model=TagsResponse, summary="Generate video tags")
async def tags(request: TagRequest) -> TagsResponse:
    return TagsResponse(tags=generate_tags(request.topic))


@router.post("/script", response_model=ScriptResponse, summary="Generate a script outline")
async def script(request: ScriptRequest) -> ScriptResponse:
    return ScriptResponse(
        script=generate_script(request.topic, request.style, request.duration_minutes)
    )
