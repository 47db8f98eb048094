"""Number formatting and engagement math for channel statistics."""

import logging
import math
import random
import re
from datetime import datetime, timezone

from errors import ComputationError, InvalidChannelUrlError

logger = logging.getLogger(__name__)

_HANDLE_PATTERN = re.compile(r"youtube\.com/@([^/?]+)")


def to_int(value) -> int:
    """Parse an API count (usually a numeric string); missing means 0."""
    if value in (None, ""):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(float(value))


def format_number(value: float) -> str:
    """Render 3.0 as "3" and 2.5 as "2.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_magnitude(n) -> str:
    """Render a count as 1.5M, 12.3K or 999."""
    n = to_int(n)
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def percent_change(current, previous) -> str:
    """Signed percentage change, "+0%" when there is no baseline."""
    current = float(current or 0)
    previous = float(previous or 0)
    if not previous:
        return "+0%"

    change = f"{(current - previous) / previous * 100:.1f}"
    sign = "+" if float(change) > 0 else ""
    return f"{sign}{change}%"


def _video_rate(statistics: dict) -> float:
    views = to_int(statistics.get("viewCount"))
    if not views:
        return 0.0
    likes = to_int(statistics.get("likeCount"))
    comments = to_int(statistics.get("commentCount"))
    return (likes + comments) / views * 100


def _mean(values: list[float]) -> float:
    if not values:
        raise ComputationError("Cannot average an empty set")
    result = sum(values) / len(values)
    if math.isnan(result):
        raise ComputationError("Average is not a number")
    return result


def engagement_rate(videos: list[dict]) -> float:
    """
    Mean engagement over a set of videos, as a percentage to one decimal.

    Each video contributes (likes + comments) / views * 100, or 0 when it has
    no views. An empty set yields 0.

    Args:
        videos: Video resources with a "statistics" object
    """
    rates = [_video_rate(video.get("statistics") or {}) for video in videos]
    try:
        return round(_mean(rates), 1)
    except ComputationError as e:
        logger.debug(f"Engagement rate defaulted to 0: {e}")
        return 0.0


def video_engagement(statistics: dict) -> str:
    """Engagement of a single video, e.g. "4.2%"."""
    if not to_int(statistics.get("viewCount")):
        return "0%"
    return f"{_video_rate(statistics):.1f}%"


def extract_channel_handle(url: str) -> str:
    """Return "acme" for https://youtube.com/@acme."""
    match = _HANDLE_PATTERN.search(url or "")
    if not match:
        raise InvalidChannelUrlError(
            "Invalid YouTube channel URL. Please use a URL with @username format."
        )
    return match.group(1)


def relative_publish_date(published_at: str, now: datetime | None = None) -> str:
    """Humanize an ISO-8601 timestamp as "3 days ago", "2 weeks ago", ..."""
    published = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    seconds = abs((now - published).total_seconds())
    days = math.ceil(seconds / 86400)

    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    if days < 365:
        return f"{days // 30} months ago"
    return f"{days // 365} years ago"


def placeholder_growth(base: float, spread: float) -> str:
    """
    Random "+x.x%" growth figure in [base, base + spread).

    Stand-in until historical data exists. Not deterministic; only the
    shape of the string is stable.
    """
    return f"+{random.random() * spread + base:.1f}%"
