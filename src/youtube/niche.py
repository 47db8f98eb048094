"""Niche research over the most viewed channels and videos for a topic."""

import logging
import re

import httpx

from analyzers.base import BaseAnalyzer
from config import Settings
from errors import InvalidNicheError
from fetchers import ApiClient
from youtube.channel import require_api_key
from youtube.client import YouTubeClient
from youtube.models import ChannelInsight, ContentIdea, NicheAnalysis, VideoInsight
from youtube.stats import (
    format_magnitude,
    placeholder_growth,
    relative_publish_date,
    video_engagement,
)

logger = logging.getLogger(__name__)

POPULAR_NICHES = {
    "gaming": "Gaming & Lets Plays",
    "tech": "Tech Reviews & Tutorials",
    "lifestyle": "Lifestyle & Vlogs",
    "education": "Educational Content",
    "cooking": "Cooking & Recipe Videos",
    "fitness": "Fitness & Workout",
    "finance": "Personal Finance",
    "beauty": "Beauty & Makeup",
    "diy": "DIY & Crafts",
    "music": "Music & Covers",
    "comedy": "Comedy & Entertainment",
    "travel": "Travel & Adventure",
    "automotive": "Automotive & Cars",
    "pets": "Pets & Animals",
    "science": "Science & Education",
}

# Title substring -> tagline template, in the order patterns are checked
TAGLINE_PATTERNS = {
    "how to": "Master {niche} with Step-by-Step Guidance",
    "guide": "Complete {niche} Guide for Success",
    "tips": "Essential {niche} Tips & Strategies",
    "secrets": "Hidden {niche} Secrets Revealed",
    "tutorial": "{niche} Mastery Tutorial Series",
}

TUTORIAL_TREND = "Tutorial and how-to content is trending"
REVIEW_TREND = "Product reviews show high engagement"
LIST_TREND = "List-based content performs well"
CHALLENGE_TREND = "Challenge videos are gaining traction"

_DIGITS = re.compile(r"\d")


def analyze_trends(videos: list[dict]) -> list[str]:
    """Distinct trend statements from video titles and descriptions."""
    trends: dict[str, None] = {}

    for video in videos:
        snippet = video.get("snippet") or {}
        title = (snippet.get("title") or "").lower()
        description = (snippet.get("description") or "").lower()

        if "how to" in title or "tutorial" in description:
            trends[TUTORIAL_TREND] = None
        if "review" in title or "review" in description:
            trends[REVIEW_TREND] = None
        if "top" in title or "best" in title:
            trends[LIST_TREND] = None
        if "challenge" in title or "challenge" in description:
            trends[CHALLENGE_TREND] = None

    return list(trends)


def generate_taglines(niche: str, videos: list[dict]) -> list[str]:
    """Taglines for the title patterns that popular videos use."""
    patterns: dict[str, None] = {}
    for video in videos:
        title = ((video.get("snippet") or {}).get("title") or "").lower()
        for pattern in TAGLINE_PATTERNS:
            if pattern in title:
                patterns[pattern] = None

    return [TAGLINE_PATTERNS[pattern].format(niche=niche) for pattern in patterns]


def suggest_content(videos: list[VideoInsight], trends: list[str]) -> list[ContentIdea]:
    """Content formats worth making, based on what popular videos look like."""
    titles = [video.title.lower() for video in videos]
    ideas = []

    if any("how to" in t or "tutorial" in t for t in titles):
        ideas.append(
            ContentIdea(
                type="Tutorial Content",
                description="Create step-by-step tutorials and how-to guides",
                metrics="High engagement rate on educational content",
            )
        )
    if any(_DIGITS.search(t) or "top" in t or "best" in t for t in titles):
        ideas.append(
            ContentIdea(
                type="List-Based Content",
                description="Compile top lists and rankings",
                metrics="Strong viewer retention on curated content",
            )
        )
    if any("review" in t or "vs" in t for t in titles):
        ideas.append(
            ContentIdea(
                type="Review Content",
                description="Produce in-depth reviews and comparisons",
                metrics="High search visibility for product research",
            )
        )
    if trends:
        ideas.append(
            ContentIdea(
                type="Trend-Based Content",
                description="Create content around current trends",
                metrics="Increased potential for viral growth",
            )
        )

    return ideas


class NicheAnalyzer(BaseAnalyzer):
    """
    Summarizes the most viewed channels and videos for a niche.

    Growth figures are random placeholders (see placeholder_growth).
    Growing channels and trending videos need historical data and are
    always empty.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(settings)
        self.api = ApiClient(settings, transport=transport)

    @property
    def name(self) -> str:
        return "niche"

    async def analyze(self, niche: str) -> NicheAnalysis:
        """
        Analyze a niche from POPULAR_NICHES.

        Raises:
            InvalidNicheError, ConfigError, AuthError, TransportError
        """
        niche = (niche or "").strip().lower()
        if niche not in POPULAR_NICHES:
            raise InvalidNicheError(f"Unsupported niche: {niche!r}")
        require_api_key(self.settings)

        client = YouTubeClient(self.api)

        channel_ids = await client.search_channel_ids(niche)
        channels = await client.list_channels(channel_ids)
        video_ids = await client.search_video_ids(niche)
        videos = await client.list_videos(video_ids)

        popular_channels = [self._channel_insight(channel) for channel in channels]
        popular_videos = [self._video_insight(video) for video in videos]
        trends = analyze_trends(videos)

        logger.info(
            f"Niche {niche}: {len(popular_channels)} channels, "
            f"{len(popular_videos)} videos, {len(trends)} trends"
        )

        return NicheAnalysis(
            niche=niche,
            popular_channels=popular_channels,
            growing_channels=[],
            popular_videos=popular_videos,
            trending_videos=[],
            trends=trends,
            taglines=generate_taglines(niche, videos),
            content_ideas=suggest_content(popular_videos, trends),
        )

    @staticmethod
    def _channel_insight(channel: dict) -> ChannelInsight:
        snippet = channel.get("snippet") or {}
        stats = channel.get("statistics") or {}
        return ChannelInsight(
            name=snippet.get("title", ""),
            subscribers=format_magnitude(stats.get("subscriberCount")),
            views=format_magnitude(stats.get("viewCount")),
            growth=placeholder_growth(5, 20),
            # Top video would need a per-channel search
            top_video=snippet.get("title", ""),
        )

    @staticmethod
    def _video_insight(video: dict) -> VideoInsight:
        snippet = video.get("snippet") or {}
        stats = video.get("statistics") or {}
        published_at = snippet.get("publishedAt")
        return VideoInsight(
            title=snippet.get("title", ""),
            views=format_magnitude(stats.get("viewCount")),
            engagement=video_engagement(stats),
            growth=placeholder_growth(10, 30),
            publish_date=relative_publish_date(published_at) if published_at else "",
        )
