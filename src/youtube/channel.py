"""Channel statistics analysis."""

import logging

import httpx

from analyzers.base import BaseAnalyzer
from config import Settings
from errors import ConfigError, SignalboardError
from fetchers import ApiClient
from youtube.client import YouTubeClient
from youtube.models import ChannelSnapshot, ChannelStats
from youtube.oauth import exchange_code
from youtube.snapshots import SnapshotStore, ZeroBaselineStore
from youtube.stats import (
    engagement_rate,
    extract_channel_handle,
    format_magnitude,
    format_number,
    percent_change,
    to_int,
)

logger = logging.getLogger(__name__)


def require_api_key(settings: Settings) -> str:
    """Return the configured API key or raise before any network call."""
    api_key = (settings.youtube_api_key or "").strip()
    if not api_key:
        raise ConfigError("YouTube API key is not configured")
    return api_key


class ChannelAnalyzer(BaseAnalyzer):
    """
    Builds ChannelStats for a youtube.com/@handle URL.

    Calls, in order: handle search, channel statistics, recent uploads,
    and a video-statistics batch for engagement. Change figures compare
    against the snapshot store's previous record for the channel.
    """

    def __init__(
        self,
        settings: Settings,
        snapshots: SnapshotStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(settings)
        self.api = ApiClient(settings, transport=transport)
        self.snapshots = snapshots or ZeroBaselineStore()

    @property
    def name(self) -> str:
        return "channel"

    async def analyze(self, channel_url: str, auth_code: str | None = None) -> ChannelStats:
        """
        Fetch statistics for a channel.

        Args:
            channel_url: URL in youtube.com/@handle form
            auth_code: Optional OAuth authorization code for private data

        Raises:
            ConfigError, InvalidChannelUrlError, AuthError, TransportError
        """
        require_api_key(self.settings)

        handle = extract_channel_handle(channel_url)

        access_token = None
        if auth_code:
            access_token = await exchange_code(self.api, auth_code)

        client = YouTubeClient(self.api, access_token=access_token)

        channel_id = await client.find_channel_id(handle)
        channel = await client.get_channel(channel_id)
        stats = channel.get("statistics") or {}
        previous = self.snapshots.get(channel_id)

        video_ids = await client.recent_video_ids(channel_id)
        engagement = await self._engagement(client, video_ids)

        current = ChannelSnapshot(
            views=to_int(stats.get("viewCount")),
            subscribers=to_int(stats.get("subscriberCount")),
            videos=to_int(stats.get("videoCount")),
            engagement=engagement,
        )
        self.snapshots.record(channel_id, current)

        logger.info(f"Channel stats for @{handle} ({channel_id}): {current}")

        return ChannelStats(
            id=channel.get("id", channel_id),
            title=(channel.get("snippet") or {}).get("title", ""),
            views=format_magnitude(current.views),
            subscribers=format_magnitude(current.subscribers),
            videos=format_magnitude(current.videos),
            engagement=f"{format_number(engagement)}%",
            views_change=percent_change(current.views, previous.views),
            subscribers_change=percent_change(current.subscribers, previous.subscribers),
            videos_change=percent_change(current.videos, previous.videos),
            engagement_change=percent_change(engagement, previous.engagement),
        )

    async def _engagement(self, client: YouTubeClient, video_ids: list[str]) -> float:
        try:
            videos = await client.list_videos(video_ids, part="statistics")
        except SignalboardError as e:
            logger.warning(f"Error calculating engagement rate: {e}")
            return 0.0
        return engagement_rate(videos)
