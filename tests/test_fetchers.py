from urllib.parse import unquote

import httpx
import pytest

from conftest import json_response
from errors import AuthError, InvalidUrlError, TransportError
from fetchers import ApiClient, DocumentFetcher


@pytest.mark.asyncio
async def test_fetch_document_goes_through_proxy(settings):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="<html><body>hi</body></html>", headers={"Cache-Control": "no-cache"})

    fetcher = DocumentFetcher(settings, transport=httpx.MockTransport(handler))
    document = await fetcher.fetch_document("https://example.com/page?q=1")

    assert document.url == "https://example.com/page?q=1"
    assert document.html == "<html><body>hi</body></html>"
    assert "cache-control" in {k.lower() for k in document.headers}

    request = seen[0]
    assert request.url.host == "corsproxy.io"
    assert unquote(request.url.query.decode()) == "https://example.com/page?q=1"


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["ftp://example.com", "not a url", "https://", ""])
async def test_fetch_document_rejects_invalid_urls(settings, url):
    fetcher = DocumentFetcher(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    with pytest.raises(InvalidUrlError):
        await fetcher.fetch_document(url)


@pytest.mark.asyncio
async def test_fetch_document_non_success_status(settings):
    fetcher = DocumentFetcher(settings, transport=httpx.MockTransport(lambda r: httpx.Response(404)))
    with pytest.raises(TransportError, match="404 Not Found"):
        await fetcher.fetch_document("https://example.com")


@pytest.mark.asyncio
async def test_fetch_document_empty_body(settings):
    fetcher = DocumentFetcher(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200, text="")))
    with pytest.raises(TransportError, match="No content"):
        await fetcher.fetch_document("https://example.com")


@pytest.mark.asyncio
async def test_fetch_document_network_failure(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = DocumentFetcher(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError):
        await fetcher.fetch_document("https://example.com")


@pytest.mark.asyncio
async def test_fetch_json_adds_key_and_bearer_token(settings):
    seen = []

    def handler(request):
        seen.append(request)
        return json_response({"items": []})

    api = ApiClient(settings, transport=httpx.MockTransport(handler))
    data = await api.fetch_json("search", {"q": "@acme"}, bearer_token="tok")

    assert data == {"items": []}
    request = seen[0]
    assert request.url.path == "/youtube/v3/search"
    assert request.url.params["key"] == "test-key"
    assert request.url.params["q"] == "@acme"
    assert request.headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_fetch_json_without_token_sends_no_authorization(settings):
    seen = []

    def handler(request):
        seen.append(request)
        return json_response({})

    api = ApiClient(settings, transport=httpx.MockTransport(handler))
    await api.fetch_json("channels")

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_fetch_json_auth_failure_surfaces_provider_message(settings):
    def handler(request):
        return json_response({"error": {"message": "API key not valid"}}, status_code=403)

    api = ApiClient(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(AuthError, match="API key not valid"):
        await api.fetch_json("search")


@pytest.mark.asyncio
async def test_fetch_json_server_error(settings):
    api = ApiClient(settings, transport=httpx.MockTransport(lambda r: httpx.Response(500)))
    with pytest.raises(TransportError):
        await api.fetch_json("search")


@pytest.mark.asyncio
async def test_fetch_json_rejects_non_json(settings):
    api = ApiClient(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>")))
    with pytest.raises(TransportError, match="Invalid JSON"):
        await api.fetch_json("search")
