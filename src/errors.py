"""Error taxonomy shared by the fetch layer, analyzers and API routes."""


class SignalboardError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code = 500


class InvalidUrlError(SignalboardError):
    """URL could not be parsed or does not use http/https."""

    status_code = 400


class InvalidChannelUrlError(SignalboardError):
    """Channel URL is not in youtube.com/@handle form."""

    status_code = 400


class InvalidNicheError(SignalboardError):
    """Niche is not one of the supported candidates."""

    status_code = 400


class TransportError(SignalboardError):
    """Remote returned a non-success status, an empty body, or no response."""

    status_code = 502


class ParseError(SignalboardError):
    """Response could not be turned into a usable document."""

    status_code = 422


class AuthError(SignalboardError):
    """Provider rejected the credentials or the authorization code."""

    status_code = 401


class ConfigError(SignalboardError):
    """Required configuration is missing."""

    status_code = 503


class ComputationError(SignalboardError):
    """Aggregate could not be computed. Never leaves the stats layer."""


class OAuthStateError(SignalboardError):
    """OAuth flow is unknown or not in a state that accepts the request."""

    status_code = 409
