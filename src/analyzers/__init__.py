"""Signalboard analyzers package."""

from analyzers.base import BaseAnalyzer
from analyzers.extractor import extract
from analyzers.scoring import score_page
from analyzers.signals import (
    HeaderCounts,
    KeywordDensity,
    PageSignals,
    PerformanceScore,
    ScoreSet,
    TechnicalFlags,
)

__all__ = [
    "BaseAnalyzer",
    "extract",
    "score_page",
    "HeaderCounts",
    "KeywordDensity",
    "PageSignals",
    "PerformanceScore",
    "ScoreSet",
    "TechnicalFlags",
]
