"""SEO analysis engine."""

import logging
from dataclasses import dataclass

import httpx

from analyzers.base import BaseAnalyzer
from analyzers.extractor import extract
from analyzers.scoring import score_page
from analyzers.signals import (
    HeaderCounts,
    KeywordDensity,
    PageSignals,
    PerformanceScore,
    ScoreSet,
)
from config import Settings
from fetchers import DocumentFetcher
from recommendations import Recommendation, RecommendationEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMetrics:
    """Combined page-analysis result returned to the UI."""

    url: str
    title: str
    description: str
    headers: HeaderCounts
    keywords: tuple[KeywordDensity, ...]
    performance: PerformanceScore
    recommendations: list[Recommendation]
    scores: ScoreSet


class SEOAnalyzer(BaseAnalyzer):
    """
    Analyzes a single page for on-page SEO signals.

    Pipeline:
    - Fetch the HTML through the CORS proxy
    - Extract title, description, headers, keywords and technical flags
    - Score the signals (title, description, headers, keywords, performance)
    - Evaluate the recommendation rules over the same signals

    Fetch and parse failures abort the whole analysis; scoring and
    recommendations never fail once signals exist.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(settings)
        self.fetcher = DocumentFetcher(settings, transport=transport)
        self.engine = RecommendationEngine()

    @property
    def name(self) -> str:
        return "seo"

    async def analyze(self, url: str) -> PageMetrics:
        """
        Run SEO analysis on the given URL.

        Args:
            url: Website URL to analyze

        Returns:
            PageMetrics with scores, performance and recommendations

        Raises:
            InvalidUrlError, TransportError, ParseError
        """
        document = await self.fetcher.fetch_document(url)
        signals = extract(document.html, document.url, document.headers)
        return self.evaluate(document.url, signals)

    def evaluate(self, url: str, signals: PageSignals) -> PageMetrics:
        """Score and review already-extracted signals."""
        scores, performance = score_page(signals)
        recommendations = self.engine.generate(signals)

        logger.info(
            f"SEO analysis for {url}: performance={performance.overall}, "
            f"{len(recommendations)} recommendations"
        )

        return PageMetrics(
            url=url,
            title=signals.title,
            description=signals.description,
            headers=signals.header_counts,
            keywords=signals.keyword_densities,
            performance=performance,
            recommendations=recommendations,
            scores=scores,
        )


# Convenience function
async def run_seo_analysis(url: str, settings: Settings) -> PageMetrics:
    """Run SEO analysis on the given URL."""
    analyzer = SEOAnalyzer(settings)
    return await analyzer.analyze(url)
