import json

import httpx
import pytest

from config import Settings

PAGE_HTML = """
<html>
<head>
  <title>  Fresh Pasta Recipes for Busy Weeknights  </title>
  <meta name="description" content="Quick pasta recipes with simple sauces, fresh noodles and practical tips for cooking dinner on busy weeknights without stress.">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="canonical" href="https://example.com/pasta">
  <meta property="og:title" content="Fresh Pasta">
  <script type="application/ld+json">{"@type": "Recipe"}</script>
</head>
<body>
  <h1>Pasta</h1>
  <h2>Sauce</h2>
  <h2>Noodles</h2>
  <h3>Tips</h3>
  <p>Pasta pasta pasta sauce. This is with your water!</p>
</body>
</html>
"""


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        youtube_api_key="test-key",
        youtube_oauth_client_id="client-id",
        youtube_oauth_client_secret="client-secret",
        youtube_oauth_redirect_uri="http://localhost:3000/oauth/callback",
        oauth_timeout=60,
    )


@pytest.fixture
def page_html():
    return PAGE_HTML


def json_response(data: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json"},
    )


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
