"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class PageAnalysisRequest(BaseModel):
    """Request body for analyzing a single page."""

    # Plain str: malformed URLs are reported by the fetcher as InvalidUrlError
    url: str = Field(
        ...,
        description="Absolute http/https URL of the page to analyze",
        examples=["https://example.com"],
    )


class ChannelStatsRequest(BaseModel):
    """Request body for channel statistics."""

    channel_url: str = Field(
        ...,
        description="Channel URL in youtube.com/@handle form",
        examples=["https://youtube.com/@acme"],
    )
    auth_code: str | None = Field(
        default=None,
        description="OAuth authorization code for private channel data",
    )


class NicheAnalysisRequest(BaseModel):
    niche: str = Field(..., examples=["gaming"])


class OAuthCallbackRequest(BaseModel):
    """Redirect result relayed by the OAuth popup."""

    state: str
    code: str | None = None
    error: str | None = None


class TitleRequest(BaseModel):
    topic: str = Field(..., min_length=1)
    style: str = Field(default="how-to", examples=["how-to", "listicle", "review"])


class TagRequest(BaseModel):
    topic: str = Field(..., min_length=1)


class ScriptRequest(BaseModel):
    topic: str = Field(..., min_length=1)
    style: str = Field(
        default="educational", examples=["educational", "entertainment", "review"]
    )
    duration_minutes: float = Field(default=5, ge=1, le=60)


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class HeaderCountsResponse(_FromAttributes):
    h1: int
    h2: int
    h3: int


class KeywordResponse(_FromAttributes):
    word: str
    density: float


class PerformanceResponse(_FromAttributes):
    overall: int
    mobile: int
    security: str
    load_time: str


class ScoresResponse(_FromAttributes):
    title: int
    description: int
    headers: int
    keywords: int


class RecommendationResponse(_FromAttributes):
    """Response schema for a single recommendation."""

    category: str
    issue: str
    impact: str
    suggestion: str


class PageMetricsResponse(_FromAttributes):
    """Full page-analysis result."""

    url: str
    title: str
    description: str
    headers: HeaderCountsResponse
    keywords: list[KeywordResponse]
    performance: PerformanceResponse
    recommendations: list[RecommendationResponse]
    scores: ScoresResponse


class ChannelStatsResponse(_FromAttributes):
    id: str
    title: str
    views: str
    subscribers: str
    videos: str
    engagement: str
    views_change: str
    subscribers_change: str
    videos_change: str
    engagement_change: str


class ChannelInsightResponse(_FromAttributes):
    name: str
    subscribers: str
    views: str
    growth: str
    top_video: str


class VideoInsightResponse(_FromAttributes):
    title: str
    views: str
    engagement: str
    growth: str
    publish_date: str


class ContentIdeaResponse(_FromAttributes):
    type: str
    description: str
    metrics: str


class NicheAnalysisResponse(_FromAttributes):
    """Niche research result. Growth figures are non-deterministic placeholders."""

    niche: str
    popular_channels: list[ChannelInsightResponse]
    growing_channels: list[ChannelInsightResponse]
    popular_videos: list[VideoInsightResponse]
    trending_videos: list[VideoInsightResponse]
    trends: list[str]
    taglines: list[str]
    content_ideas: list[ContentIdeaResponse]


class NicheOption(BaseModel):
    value: str
    label: str


class NicheListResponse(BaseModel):
    niches: list[NicheOption]
    count: int


class OAuthStartResponse(BaseModel):
    state: str
    authorization_url: str


class OAuthFlowResponse(BaseModel):
    state: str
    status: str
    code: str | None = None
    error: str | None = None


class TitlesResponse(BaseModel):
    titles: list[str]


class TagsResponse(BaseModel):
    tags: list[str]


class ScriptResponse(BaseModel):
    script: str


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str = "signalboard"
    version: str = "0.1.0"
    youtube_configured: bool = False
    oauth_configured: bool = False
