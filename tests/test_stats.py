import re
from datetime import datetime, timedelta, timezone

import pytest

from errors import InvalidChannelUrlError
from youtube.stats import (
    engagement_rate,
    extract_channel_handle,
    format_magnitude,
    percent_change,
    placeholder_growth,
    relative_publish_date,
    video_engagement,
)


@pytest.mark.parametrize(
    "value, expected",
    [(1500000, "1.5M"), ("2500", "2.5K"), (999, "999"), ("0", "0"), (None, "0"), (1000, "1.0K")],
)
def test_format_magnitude(value, expected):
    assert format_magnitude(value) == expected


@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (120, 100, "+20.0%"),
        (100, 0, "+0%"),
        (80, 100, "-20.0%"),
        (100, 100, "0.0%"),
        ("150", "100", "+50.0%"),
    ],
)
def test_percent_change(current, previous, expected):
    assert percent_change(current, previous) == expected


def test_engagement_rate_averages_over_videos():
    videos = [
        {"statistics": {"viewCount": "1000", "likeCount": "40", "commentCount": "10"}},
        {"statistics": {"viewCount": "0", "likeCount": "5"}},
    ]
    assert engagement_rate(videos) == 2.5


def test_engagement_rate_of_empty_set_is_zero():
    assert engagement_rate([]) == 0


def test_engagement_rate_tolerates_missing_statistics():
    assert engagement_rate([{"id": "v1"}]) == 0


def test_video_engagement():
    assert video_engagement({"viewCount": "200", "likeCount": "9"}) == "4.5%"
    assert video_engagement({"viewCount": "0"}) == "0%"


@pytest.mark.parametrize(
    "url, handle",
    [
        ("https://youtube.com/@acme", "acme"),
        ("https://www.youtube.com/@acme/videos", "acme"),
        ("youtube.com/@acme?si=abc", "acme"),
    ],
)
def test_extract_channel_handle(url, handle):
    assert extract_channel_handle(url) == handle


@pytest.mark.parametrize(
    "url", ["https://youtube.com/acme", "https://youtube.com/channel/UC123", ""]
)
def test_extract_channel_handle_rejects_other_shapes(url):
    with pytest.raises(InvalidChannelUrlError):
        extract_channel_handle(url)


@pytest.mark.parametrize(
    "age, expected",
    [
        (timedelta(days=2, hours=1), "3 days ago"),
        (timedelta(days=14), "2 weeks ago"),
        (timedelta(days=65), "2 months ago"),
        (timedelta(days=800), "2 years ago"),
    ],
)
def test_relative_publish_date(age, expected):
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
    published = (now - age).isoformat().replace("+00:00", "Z")
    assert relative_publish_date(published, now=now) == expected


def test_placeholder_growth_shape():
    # Random by design: only the shape and range are stable
    for _ in range(20):
        value = placeholder_growth(5, 20)
        assert re.fullmatch(r"\+\d+\.\d%", value)
        assert 5 <= float(value[1:-1]) <= 25
