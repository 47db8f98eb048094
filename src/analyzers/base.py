"""Base analyzer interface."""

from abc import ABC, abstractmethod
from typing import Any

from config import Settings


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    async def analyze(self, target: str) -> Any:
        """
        Run analysis on the given target.

        Args:
            target: Page URL, channel URL or niche, depending on the analyzer

        Returns:
            The analyzer's structured result

        Raises:
            SignalboardError: When the analysis cannot complete
        """
        pass
