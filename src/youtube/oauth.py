"""OAuth authorization-code flow for private YouTube data."""

import enum
import logging
import secrets
import time
from typing import Callable
from urllib.parse import urlencode

from config import Settings
from errors import AuthError, ConfigError, OAuthStateError, TransportError
from fetchers import ApiClient

logger = logging.getLogger(__name__)

YOUTUBE_READONLY_SCOPE = "https://www.googleapis.com/auth/youtube.readonly"


class OAuthState(str, enum.Enum):
    IDLE = "idle"
    AWAITING_REDIRECT = "awaiting_redirect"
    COMPLETED = "completed"
    FAILED = "failed"
    ABANDONED = "abandoned"


FINAL_STATES = frozenset(
    {OAuthState.COMPLETED, OAuthState.FAILED, OAuthState.ABANDONED}
)


def build_authorization_url(settings: Settings, state: str) -> str:
    """Consent-screen URL the user is sent to."""
    if not settings.youtube_oauth_client_id or not settings.youtube_oauth_redirect_uri:
        raise ConfigError("OAuth credentials not configured")

    params = {
        "client_id": settings.youtube_oauth_client_id,
        "redirect_uri": settings.youtube_oauth_redirect_uri,
        "response_type": "code",
        "scope": YOUTUBE_READONLY_SCOPE,
        "access_type": "offline",
        "prompt": "consent",
        "state": state,
    }
    return f"{settings.oauth_authorize_url}?{urlencode(params)}"


async def exchange_code(api: ApiClient, code: str) -> str:
    """
    Exchange an authorization code for an access token.

    Raises:
        ConfigError: Client credentials are not configured
        AuthError: Provider rejected the code or returned no access token
    """
    settings = api.settings
    if not (
        settings.youtube_oauth_client_id
        and settings.youtube_oauth_client_secret
        and settings.youtube_oauth_redirect_uri
    ):
        raise ConfigError("OAuth credentials not configured")

    try:
        tokens = await api.post_form(
            settings.oauth_token_url,
            {
                "client_id": settings.youtube_oauth_client_id,
                "client_secret": settings.youtube_oauth_client_secret,
                "code": code,
                "redirect_uri": settings.youtube_oauth_redirect_uri,
                "grant_type": "authorization_code",
            },
        )
    except TransportError as e:
        logger.error(f"Token exchange failed: {e}")
        raise AuthError("Failed to exchange authorization code for tokens") from e

    access_token = tokens.get("access_token")
    if not access_token:
        raise AuthError("Token response did not include an access token")
    return access_token


class OAuthFlow:
    """
    One authorization attempt.

    Idle -> AwaitingRedirect on start(). From AwaitingRedirect the first
    callback carrying the matching state token moves the flow to Completed
    or Failed; cancel() or an elapsed deadline moves it to Abandoned. Final
    states ignore every later message.
    """

    def __init__(
        self,
        settings: Settings,
        state_token: str | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings
        self.state_token = state_token or secrets.token_urlsafe(24)
        self.state = OAuthState.IDLE
        self.authorization_url: str | None = None
        self.code: str | None = None
        self.error: str | None = None
        self._clock = clock
        self._deadline: float | None = None

    @property
    def is_finished(self) -> bool:
        self.check_timeout()
        return self.state in FINAL_STATES

    def start(self) -> str:
        if self.state is not OAuthState.IDLE:
            raise OAuthStateError(f"OAuth flow already {self.state.value}")

        url = build_authorization_url(self.settings, self.state_token)
        self.authorization_url = url
        self.state = OAuthState.AWAITING_REDIRECT
        self._deadline = self._clock() + self.settings.oauth_timeout
        return url

    def check_timeout(self) -> None:
        if (
            self.state is OAuthState.AWAITING_REDIRECT
            and self._clock() >= self._deadline
        ):
            logger.info(f"OAuth flow {self.state_token[:8]} timed out")
            self.state = OAuthState.ABANDONED

    def _accepts(self, state_token: str) -> bool:
        self.check_timeout()
        return (
            self.state is OAuthState.AWAITING_REDIRECT
            and state_token == self.state_token
        )

    def complete(self, state_token: str, code: str) -> bool:
        """Record the authorization code. Returns False if ignored."""
        if not self._accepts(state_token):
            return False
        self.code = code
        self.state = OAuthState.COMPLETED
        return True

    def fail(self, state_token: str, error: str) -> bool:
        """Record a provider error. Returns False if ignored."""
        if not self._accepts(state_token):
            return False
        self.error = error
        self.state = OAuthState.FAILED
        return True

    def cancel(self) -> None:
        if self.state in (OAuthState.IDLE, OAuthState.AWAITING_REDIRECT):
            self.state = OAuthState.ABANDONED


class OAuthFlowRegistry:
    """Pending flows keyed by state token. Finished flows are purged."""

    def __init__(self, settings: Settings, clock: Callable[[], float] = time.monotonic):
        self.settings = settings
        self._clock = clock
        self._flows: dict[str, OAuthFlow] = {}

    def __len__(self) -> int:
        return len(self._flows)

    def purge(self) -> None:
        for token in [t for t, flow in self._flows.items() if flow.is_finished]:
            del self._flows[token]

    def start(self) -> OAuthFlow:
        self.purge()
        flow = OAuthFlow(self.settings, clock=self._clock)
        flow.start()
        self._flows[flow.state_token] = flow
        logger.info(f"Started OAuth flow {flow.state_token[:8]}")
        return flow

    def _pop(self, state_token: str) -> OAuthFlow:
        flow = self._flows.pop(state_token, None)
        if flow is None:
            raise OAuthStateError("Unknown or expired OAuth flow")
        return flow

    def handle_callback(
        self, state_token: str, code: str | None = None, error: str | None = None
    ) -> OAuthFlow:
        """
        Deliver the redirect result to its flow.

        The flow is removed from the registry whether or not the message is
        honored, so at most one completion is ever accepted.
        """
        flow = self._pop(state_token)
        if error:
            flow.fail(state_token, error)
        elif code:
            flow.complete(state_token, code)
        else:
            flow.fail(state_token, "Authorization response had no code")

        if flow.state is OAuthState.ABANDONED:
            raise OAuthStateError("OAuth flow timed out")
        return flow

    def cancel(self, state_token: str) -> OAuthFlow:
        flow = self._pop(state_token)
        flow.cancel()
        return flow
