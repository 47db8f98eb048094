"""Signalboard fetchers package."""

from fetchers.http import ApiClient, DocumentFetcher, FetchedDocument

__all__ = [
    "ApiClient",
    "DocumentFetcher",
    "FetchedDocument",
]
