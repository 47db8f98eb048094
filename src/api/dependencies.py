"""Shared FastAPI dependencies."""

from functools import lru_cache

import httpx

from config import get_settings
from youtube.oauth import OAuthFlowRegistry
from youtube.snapshots import SnapshotStore, build_snapshot_store


def get_http_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outgoing requests; None uses httpx's default."""
    return None


@lru_cache
def get_snapshot_store() -> SnapshotStore:
    """Process-wide snapshot store, built from settings on first use."""
    return build_snapshot_store(get_settings())


@lru_cache
def get_oauth_registry() -> OAuthFlowRegistry:
    """Process-wide registry of pending OAuth flows."""
    return OAuthFlowRegistry(get_settings())
