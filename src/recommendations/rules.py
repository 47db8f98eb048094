"""Recommendation rules definition."""

from dataclasses import dataclass
from typing import Callable

from analyzers.scoring import MIB, real_keywords
from analyzers.signals import KeywordDensity, PageSignals


@dataclass(frozen=True)
class Recommendation:
    """A single actionable finding."""

    category: str
    issue: str
    impact: str  # high, medium, low
    suggestion: str


@dataclass
class Rule:
    """A single recommendation rule."""

    id: str
    category: str
    impact: str  # high, medium, low
    issue: str
    suggestion: str
    condition: Callable[[PageSignals], bool]

    def evaluate(self, signals: PageSignals) -> list[Recommendation]:
        if not self.condition(signals):
            return []
        return [
            Recommendation(
                category=self.category,
                issue=self.issue,
                impact=self.impact,
                suggestion=self.suggestion,
            )
        ]


@dataclass
class KeywordRule(Rule):
    """A rule evaluated once per keyword; `issue` is formatted with {word}."""

    condition: Callable[[KeywordDensity], bool]

    def evaluate(self, signals: PageSignals) -> list[Recommendation]:
        return [
            Recommendation(
                category=self.category,
                issue=self.issue.format(word=keyword.word),
                impact=self.impact,
                suggestion=self.suggestion,
            )
            for keyword in real_keywords(signals.keyword_densities)
            if self.condition(keyword)
        ]


# =============================================================================
# Content Rules
# =============================================================================

TITLE_RULES = [
    Rule(
        id="missing-title",
        category="Title",
        impact="high",
        issue="Missing page title",
        suggestion="Add a descriptive page title between 30-60 characters.",
        condition=lambda s: not s.title,
    ),
    Rule(
        id="title-too-short",
        category="Title",
        impact="medium",
        issue="Title too short",
        suggestion="Expand the title to be more descriptive (30-60 characters).",
        condition=lambda s: bool(s.title) and len(s.title) < 30,
    ),
    Rule(
        id="title-too-long",
        category="Title",
        impact="medium",
        issue="Title too long",
        suggestion="Shorten the title to ensure it displays properly in search results (30-60 characters).",
        condition=lambda s: len(s.title) > 60,
    ),
]

DESCRIPTION_RULES = [
    Rule(
        id="missing-meta-description",
        category="Meta Description",
        impact="high",
        issue="Missing meta description",
        suggestion="Add a compelling meta description between 120-160 characters.",
        condition=lambda s: not s.description,
    ),
    Rule(
        id="description-too-short",
        category="Meta Description",
        impact="medium",
        issue="Description too short",
        suggestion="Expand the meta description to be more informative (120-160 characters).",
        condition=lambda s: bool(s.description) and len(s.description) < 120,
    ),
    Rule(
        id="description-too-long",
        category="Meta Description",
        impact="medium",
        issue="Description too long",
        suggestion="Shorten the meta description to prevent truncation in search results (120-160 characters).",
        condition=lambda s: len(s.description) > 160,
    ),
]

HEADER_RULES = [
    Rule(
        id="missing-h1",
        category="Headers",
        impact="high",
        issue="Missing H1 tag",
        suggestion="Add a single H1 tag containing your main page heading.",
        condition=lambda s: s.header_counts.h1 == 0,
    ),
    Rule(
        id="multiple-h1",
        category="Headers",
        impact="medium",
        issue="Multiple H1 tags",
        suggestion="Use only one H1 tag per page for better SEO structure.",
        condition=lambda s: s.header_counts.h1 > 1,
    ),
]

KEYWORD_RULES = [
    KeywordRule(
        id="keyword-overuse",
        category="Keywords",
        impact="medium",
        issue='Keyword "{word}" appears too frequently',
        suggestion="Reduce keyword density to avoid over-optimization. Aim for 1-3%.",
        condition=lambda kw: kw.density > 5,
    ),
]

# =============================================================================
# Technical Rules
# =============================================================================

TECHNICAL_RULES = [
    Rule(
        id="missing-canonical",
        category="Technical SEO",
        impact="medium",
        issue="Missing canonical tag",
        suggestion="Add a canonical tag to prevent duplicate content issues.",
        condition=lambda s: not s.technical_flags.has_canonical,
    ),
    Rule(
        id="missing-structured-data",
        category="Technical SEO",
        impact="medium",
        issue="No structured data",
        suggestion="Implement schema markup to enhance search result appearance.",
        condition=lambda s: not s.technical_flags.has_structured_data,
    ),
    Rule(
        id="missing-open-graph",
        category="Social Media",
        impact="low",
        issue="Missing OpenGraph tags",
        suggestion="Add OpenGraph meta tags for better social media sharing.",
        condition=lambda s: not s.technical_flags.has_open_graph,
    ),
    Rule(
        id="missing-viewport",
        category="Mobile Optimization",
        impact="high",
        issue="Missing viewport meta tag",
        suggestion="Add a viewport meta tag for proper mobile rendering.",
        condition=lambda s: not s.technical_flags.has_viewport,
    ),
    Rule(
        id="no-https",
        category="Security",
        impact="high",
        issue="Not using HTTPS",
        suggestion="Switch to HTTPS to improve security and SEO ranking.",
        condition=lambda s: not s.technical_flags.has_https,
    ),
    Rule(
        id="large-page",
        category="Performance",
        impact="high",
        issue="Large page size",
        suggestion="Optimize images and minify resources to reduce page size below 5MB.",
        condition=lambda s: s.content_size_bytes > 5 * MIB,
    ),
]

# Evaluation order is the order findings are reported in
ALL_RULES = (
    TITLE_RULES
    + DESCRIPTION_RULES
    + HEADER_RULES
    + KEYWORD_RULES
    + TECHNICAL_RULES
)
