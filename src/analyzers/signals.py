"""Value types produced by the page-analysis pipeline."""

from dataclasses import dataclass, field

NO_TITLE = "No title found"
NO_DESCRIPTION = "No description found"
NO_KEYWORDS = "No keywords found"


@dataclass(frozen=True)
class HeaderCounts:
    h1: int = 0
    h2: int = 0
    h3: int = 0


@dataclass(frozen=True)
class KeywordDensity:
    word: str
    density: float  # percent of filtered tokens


@dataclass(frozen=True)
class TechnicalFlags:
    has_viewport: bool = False
    has_https: bool = False
    has_caching: bool = False
    has_canonical: bool = False
    has_structured_data: bool = False
    has_open_graph: bool = False
    has_twitter_cards: bool = False


@dataclass(frozen=True)
class PageSignals:
    """Everything the scorer and recommender need from one fetched page."""

    title: str
    description: str
    header_counts: HeaderCounts = field(default_factory=HeaderCounts)
    body_word_count: int = 0
    keyword_densities: tuple[KeywordDensity, ...] = ()
    technical_flags: TechnicalFlags = field(default_factory=TechnicalFlags)
    content_size_bytes: int = 0


@dataclass(frozen=True)
class ScoreSet:
    title: int
    description: int
    headers: int
    keywords: int


@dataclass(frozen=True)
class PerformanceScore:
    overall: int
    mobile: int
    security: str  # A+, A, B or C
    load_time: str  # content size, e.g. "0.25MB"
