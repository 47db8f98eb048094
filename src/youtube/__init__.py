"""Signalboard YouTube package."""

from youtube.channel import ChannelAnalyzer
from youtube.models import (
    ChannelInsight,
    ChannelSnapshot,
    ChannelStats,
    ContentIdea,
    NicheAnalysis,
    VideoInsight,
)
from youtube.niche import POPULAR_NICHES, NicheAnalyzer
from youtube.oauth import OAuthFlow, OAuthFlowRegistry, OAuthState
from youtube.snapshots import (
    InMemorySnapshotStore,
    SnapshotStore,
    ZeroBaselineStore,
    build_snapshot_store,
)

__all__ = [
    "ChannelAnalyzer",
    "ChannelInsight",
    "ChannelSnapshot",
    "ChannelStats",
    "ContentIdea",
    "NicheAnalysis",
    "VideoInsight",
    "POPULAR_NICHES",
    "NicheAnalyzer",
    "OAuthFlow",
    "OAuthFlowRegistry",
    "OAuthState",
    "InMemorySnapshotStore",
    "SnapshotStore",
    "ZeroBaselineStore",
    "build_snapshot_store",
]
