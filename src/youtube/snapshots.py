"""Previous-period baselines for channel statistics."""

import logging
from abc import ABC, abstractmethod

from config import Settings
from errors import ConfigError
from youtube.models import ChannelSnapshot

logger = logging.getLogger(__name__)


class SnapshotStore(ABC):
    """Keyed store of channel id -> last seen ChannelSnapshot."""

    @abstractmethod
    def get(self, channel_id: str) -> ChannelSnapshot:
        pass

    @abstractmethod
    def record(self, channel_id: str, snapshot: ChannelSnapshot) -> None:
        pass


class ZeroBaselineStore(SnapshotStore):
    """No history: every change figure reports "+0%"."""

    def get(self, channel_id: str) -> ChannelSnapshot:
        return ChannelSnapshot()

    def record(self, channel_id: str, snapshot: ChannelSnapshot) -> None:
        pass


class InMemorySnapshotStore(SnapshotStore):
    """Keeps the last snapshot per channel for the life of the process."""

    def __init__(self):
        self._snapshots: dict[str, ChannelSnapshot] = {}

    def get(self, channel_id: str) -> ChannelSnapshot:
        return self._snapshots.get(channel_id, ChannelSnapshot())

    def record(self, channel_id: str, snapshot: ChannelSnapshot) -> None:
        self._snapshots[channel_id] = snapshot
        logger.debug(f"Recorded snapshot for {channel_id}")


def build_snapshot_store(settings: Settings) -> SnapshotStore:
    """Create the store named by settings.snapshot_store."""
    kind = settings.snapshot_store.lower()
    if kind == "zero":
        return ZeroBaselineStore()
    if kind == "memory":
        return InMemorySnapshotStore()
    raise ConfigError(f"Unknown snapshot store: {settings.snapshot_store}")
