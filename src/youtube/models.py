"""Value types produced by the YouTube pipelines."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChannelStats:
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


@dataclass(frozen=True)
class ChannelSnapshot:
    """Raw counts of a channel at one point in time."""

    views: int = 0
    subscribers: int = 0
    videos: int = 0
    engagement: float = 0.0


@dataclass(frozen=True)
class ChannelInsight:
    name: str
    subscribers: str
    views: str
    growth: str
    top_video: str


@dataclass(frozen=True)
class VideoInsight:
    title: str
    views: str
    engagement: str
    growth: str
    publish_date: str


@dataclass(frozen=True)
class ContentIdea:
    type: str
    description: str
    metrics: str


@dataclass(frozen=True)
class NicheAnalysis:
    niche: str
    popular_channels: list[ChannelInsight] = field(default_factory=list)
    growing_channels: list[ChannelInsight] = field(default_factory=list)
    popular_videos: list[VideoInsight] = field(default_factory=list)
    trending_videos: list[VideoInsight] = field(default_factory=list)
    trends: list[str] = field(default_factory=list)
    taglines: list[str] = field(default_factory=list)
    content_ideas: list[ContentIdea] = field(default_factory=list)
