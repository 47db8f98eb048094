"""
YouTube Data API client for fetching channel and video data.
"""

import logging
from typing import Any

from errors import TransportError
from fetchers import ApiClient

logger = logging.getLogger(__name__)


class YouTubeClient:
    """Thin wrapper over the Data API v3 read endpoints."""

    def __init__(self, api: ApiClient, access_token: str | None = None):
        """
        Initialize YouTube client.

        Args:
            api: JSON client configured with the API key
            access_token: OAuth access token for private data, if authorized
        """
        self.api = api
        self.access_token = access_token

    async def _get(self, endpoint: str, **params: Any) -> dict[str, Any]:
        return await self.api.fetch_json(
            endpoint, params, bearer_token=self.access_token
        )

    async def find_channel_id(self, handle: str) -> str:
        """Search for a channel by handle and return its ID."""
        data = await self._get(
            "search", part="snippet", q=f"@{handle}", type="channel"
        )
        items = data.get("items") or []
        channel_id = items[0].get("id", {}).get("channelId") if items else None
        if not channel_id:
            raise TransportError("Channel not found")
        return channel_id

    async def get_channel(self, channel_id: str) -> dict[str, Any]:
        """Return the channel resource with snippet and statistics."""
        data = await self._get("channels", part="snippet,statistics", id=channel_id)
        items = data.get("items") or []
        if not items:
            raise TransportError("Channel statistics not available")
        return items[0]

    async def recent_video_ids(self, channel_id: str, max_results: int = 10) -> list[str]:
        """IDs of the channel's most recent uploads, newest first."""
        data = await self._get(
            "search",
            part="id",
            channelId=channel_id,
            order="date",
            type="video",
            maxResults=max_results,
        )
        return _ids(data, "videoId")

    async def search_channel_ids(self, query: str, max_results: int = 3) -> list[str]:
        """IDs of the most viewed channels matching a query."""
        data = await self._get(
            "search",
            part="snippet",
            q=query,
            type="channel",
            order="viewCount",
            maxResults=max_results,
        )
        return _ids(data, "channelId")

    async def search_video_ids(self, query: str, max_results: int = 3) -> list[str]:
        """IDs of the most viewed videos matching a query."""
        data = await self._get(
            "search",
            part="snippet",
            q=query,
            type="video",
            order="viewCount",
            maxResults=max_results,
        )
        return _ids(data, "videoId")

    async def list_channels(self, channel_ids: list[str]) -> list[dict[str, Any]]:
        """Channel resources (snippet, statistics) for a batch of IDs."""
        if not channel_ids:
            return []
        data = await self._get(
            "channels", part="snippet,statistics", id=",".join(channel_ids)
        )
        return data.get("items") or []

    async def list_videos(
        self, video_ids: list[str], part: str = "snippet,statistics"
    ) -> list[dict[str, Any]]:
        """Video resources for a batch of IDs."""
        if not video_ids:
            return []
        data = await self._get("videos", part=part, id=",".join(video_ids))
        return data.get("items") or []


def _ids(data: dict[str, Any], key: str) -> list[str]:
    ids: list[str] = []
    for item in data.get("items") or []:
        value = (item.get("id") or {}).get(key)
        if value and value not in ids:
            ids.append(value)
    return ids
