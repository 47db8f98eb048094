from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Signalboard"
    debug: bool = False

    # Page fetching
    http_timeout: int = 30
    cors_proxy_url: str = "https://corsproxy.io/?"
    user_agent: str = (
        "Mozilla/5.0 (compatible; SignalboardBot/1.0; +https://example.com/bot)"
    )

    # YouTube Data API
    youtube_api_base: str = "https://youtube.googleapis.com/youtube/v3"
    youtube_api_key: str = ""

    # YouTube OAuth
    youtube_oauth_client_id: str = ""
    youtube_oauth_client_secret: str = ""
    youtube_oauth_redirect_uri: str = ""
    oauth_authorize_url: str = "https://accounts.google.com/o/oauth2/auth"
    oauth_token_url: str = "https://oauth2.googleapis.com/token"
    oauth_timeout: int = 300

    # Previous-period channel stats: "zero" (fixed baseline) or "memory"
    snapshot_store: str = "zero"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built once at startup."""
    return Settings()
