from urllib.parse import parse_qs, urlparse

import pytest

from errors import ConfigError, OAuthStateError
from youtube.oauth import (
    YOUTUBE_READONLY_SCOPE,
    OAuthFlow,
    OAuthFlowRegistry,
    OAuthState,
    build_authorization_url,
)


def test_authorization_url(settings):
    url = build_authorization_url(settings, "state-1")
    parsed = urlparse(url)
    params = {k: v[0] for k, v in parse_qs(parsed.query).items()}

    assert parsed.netloc == "accounts.google.com"
    assert params == {
        "client_id": "client-id",
        "redirect_uri": "http://localhost:3000/oauth/callback",
        "response_type": "code",
        "scope": YOUTUBE_READONLY_SCOPE,
        "access_type": "offline",
        "prompt": "consent",
        "state": "state-1",
    }


def test_authorization_url_requires_credentials(settings):
    settings = settings.model_copy(update={"youtube_oauth_client_id": ""})
    with pytest.raises(ConfigError):
        build_authorization_url(settings, "state-1")


class TestOAuthFlow:
    def test_first_message_wins(self, settings, clock):
        flow = OAuthFlow(settings, state_token="abc", clock=clock)
        assert flow.state is OAuthState.IDLE

        flow.start()
        assert flow.state is OAuthState.AWAITING_REDIRECT

        assert flow.complete("abc", "code-1")
        assert not flow.complete("abc", "code-2")
        assert not flow.fail("abc", "access_denied")

        assert flow.state is OAuthState.COMPLETED
        assert flow.code == "code-1"

    def test_failure(self, settings, clock):
        flow = OAuthFlow(settings, state_token="abc", clock=clock)
        flow.start()

        assert flow.fail("abc", "access_denied")
        assert flow.state is OAuthState.FAILED
        assert flow.error == "access_denied"

    def test_mismatched_state_is_ignored(self, settings, clock):
        flow = OAuthFlow(settings, state_token="abc", clock=clock)
        flow.start()

        assert not flow.complete("other", "code")
        assert flow.state is OAuthState.AWAITING_REDIRECT

    def test_messages_before_start_are_ignored(self, settings, clock):
        flow = OAuthFlow(settings, state_token="abc", clock=clock)
        assert not flow.complete("abc", "code")
        assert flow.state is OAuthState.IDLE

    def test_timeout_abandons_flow(self, settings, clock):
        flow = OAuthFlow(settings, state_token="abc", clock=clock)
        flow.start()

        clock.advance(settings.oauth_timeout)

        assert not flow.complete("abc", "late-code")
        assert flow.state is OAuthState.ABANDONED
        assert flow.is_finished

    def test_cancel(self, settings, clock):
        flow = OAuthFlow(settings, clock=clock)
        flow.start()
        flow.cancel()

        assert flow.state is OAuthState.ABANDONED
        assert not flow.complete(flow.state_token, "code")

    def test_cannot_start_twice(self, settings, clock):
        flow = OAuthFlow(settings, clock=clock)
        flow.start()
        with pytest.raises(OAuthStateError):
            flow.start()


class TestOAuthFlowRegistry:
    def test_callback_completes_and_removes_flow(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        flow = registry.start()
        assert len(registry) == 1

        result = registry.handle_callback(flow.state_token, code="code-1")

        assert result.state is OAuthState.COMPLETED
        assert result.code == "code-1"
        assert len(registry) == 0

        with pytest.raises(OAuthStateError):
            registry.handle_callback(flow.state_token, code="code-2")

    def test_callback_with_error(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        flow = registry.start()

        result = registry.handle_callback(flow.state_token, error="access_denied")
        assert result.state is OAuthState.FAILED

    def test_unknown_state(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        with pytest.raises(OAuthStateError):
            registry.handle_callback("nope", code="code")

    def test_expired_flows_are_purged(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        stale = registry.start()

        clock.advance(settings.oauth_timeout + 1)
        registry.start()

        assert len(registry) == 1
        with pytest.raises(OAuthStateError):
            registry.handle_callback(stale.state_token, code="code")

    def test_late_callback_reports_timeout(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        flow = registry.start()

        clock.advance(settings.oauth_timeout + 1)

        with pytest.raises(OAuthStateError, match="timed out"):
            registry.handle_callback(flow.state_token, code="code")

    def test_cancel(self, settings, clock):
        registry = OAuthFlowRegistry(settings, clock=clock)
        flow = registry.start()

        assert registry.cancel(flow.state_token).state is OAuthState.ABANDONED
        assert len(registry) == 0
