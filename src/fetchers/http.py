"""HTTP fetch layer for page HTML and JSON APIs."""

import logging
from dataclasses import dataclass, field
from urllib.parse import quote, urlparse

import httpx

from config import Settings
from errors import AuthError, InvalidUrlError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedDocument:
    """Raw HTML of a page plus the response headers it came with."""

    url: str
    html: str
    headers: dict = field(default_factory=dict)


def validate_url(url: str) -> str:
    """Return the URL stripped, or raise InvalidUrlError."""
    url = (url or "").strip()
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise InvalidUrlError("Please enter a valid HTTP or HTTPS URL")
    if not parsed.netloc:
        raise InvalidUrlError(f"Invalid URL: {url!r} has no host")

    return url


def _error_message(response: httpx.Response) -> str | None:
    """Pull a provider error message out of a JSON error body."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            return error.get("message")
        if isinstance(error, str):
            return data.get("error_description") or error
    return None


class _BaseFetcher:
    """Shared client construction for all fetchers."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            follow_redirects=True,
            headers={"User-Agent": self.settings.user_agent},
            transport=self._transport,
        )


class DocumentFetcher(_BaseFetcher):
    """Fetches page HTML through the configured CORS proxy."""

    async def fetch_document(self, url: str) -> FetchedDocument:
        """
        Fetch the raw HTML for a page.

        Args:
            url: Absolute http/https URL of the page

        Returns:
            FetchedDocument with the HTML and response headers

        Raises:
            InvalidUrlError: URL is malformed or not http/https
            TransportError: Non-2xx status, network failure or empty body
        """
        url = validate_url(url)
        proxy_url = f"{self.settings.cors_proxy_url}{quote(url, safe='')}"

        try:
            async with self._client() as client:
                response = await client.get(proxy_url)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching {url}")
            raise TransportError("Timeout fetching page") from e
        except httpx.HTTPError as e:
            logger.error(f"Network error fetching {url}: {e}")
            raise TransportError(f"Failed to fetch page: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Failed to fetch page: {response.status_code} {response.reason_phrase}"
            )

        html = response.text
        if not html:
            raise TransportError("No content received from the page")

        logger.info(f"Fetched {url} ({len(html)} chars)")
        return FetchedDocument(url=url, html=html, headers=dict(response.headers))


class ApiClient(_BaseFetcher):
    """JSON client for the YouTube Data API and the OAuth token endpoint."""

    async def fetch_json(
        self,
        endpoint: str,
        params: dict | None = None,
        bearer_token: str | None = None,
    ) -> dict:
        """
        GET a Data API endpoint and return the decoded JSON body.

        Args:
            endpoint: Resource path relative to the API base, e.g. "search"
            params: Query parameters; the API key is added automatically
            bearer_token: Optional OAuth access token

        Raises:
            AuthError: Provider rejected the key or token (401/403)
            TransportError: Other non-2xx, network failure or bad body
        """
        url = f"{self.settings.youtube_api_base.rstrip('/')}/{endpoint.lstrip('/')}"
        query = {**(params or {}), "key": self.settings.youtube_api_key}
        headers = {"Authorization": f"Bearer {bearer_token}"} if bearer_token else {}

        try:
            async with self._client() as client:
                response = await client.get(url, params=query, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise TransportError(f"Failed to reach YouTube API: {e}") from e

        return self._decode(response, endpoint)

    async def post_form(self, url: str, data: dict) -> dict:
        """POST a form-encoded body and return the decoded JSON response."""
        try:
            async with self._client() as client:
                response = await client.post(url, data=data)
        except httpx.HTTPError as e:
            logger.error(f"POST to {url} failed: {e}")
            raise TransportError(f"Failed to reach {url}: {e}") from e

        return self._decode(response, url)

    def _decode(self, response: httpx.Response, target: str) -> dict:
        if response.status_code in (401, 403):
            message = _error_message(response) or response.reason_phrase
            raise AuthError(f"Authorization failed for {target}: {message}")

        if not response.is_success:
            message = _error_message(response) or response.reason_phrase
            raise TransportError(f"Request to {target} failed: {message}")

        if not response.content:
            raise TransportError(f"Empty response from {target}")

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {target}") from e

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected response shape from {target}")
        return data
