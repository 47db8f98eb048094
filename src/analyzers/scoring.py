"""Heuristic scoring of extracted page signals."""

import re
from collections.abc import Iterable

from analyzers.signals import (
    NO_KEYWORDS,
    HeaderCounts,
    KeywordDensity,
    PageSignals,
    PerformanceScore,
    ScoreSet,
    TechnicalFlags,
)

MIB = 1024 * 1024

# (threshold bytes, overall deduction, mobile deduction), largest first
SIZE_TIERS = (
    (5 * MIB, 30, 40),
    (2 * MIB, 15, 20),
    (1 * MIB, 5, 10),
)

_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")


def _clamp(score: float) -> int:
    return round(max(0, min(100, score)))


def real_keywords(keywords: Iterable[KeywordDensity]) -> list[KeywordDensity]:
    """Drop the "No keywords found" placeholder entry."""
    return [kw for kw in keywords if kw.word != NO_KEYWORDS]


def score_title(title: str) -> int:
    if not title:
        return 0

    score = 100
    if len(title) < 30:
        score -= 30
    if len(title) > 60:
        score -= 20
    if len(title) > 70:
        score -= 20
    if not _ALPHANUMERIC.search(title):
        score -= 10
    if title.lower() == title:
        score -= 5
    if title.upper() == title:
        score -= 10

    return _clamp(score)


def score_description(description: str) -> int:
    if not description:
        return 0

    score = 100
    if len(description) < 120:
        score -= 30
    if len(description) > 160:
        score -= 20
    if not _ALPHANUMERIC.search(description):
        score -= 10
    if " " not in description:
        score -= 20
    if description.lower() == description:
        score -= 5

    return _clamp(score)


def score_headers(headers: HeaderCounts) -> int:
    score = 100
    if headers.h1 == 0:
        score -= 40
    if headers.h1 > 1:
        score -= 20
    if headers.h2 == 0:
        score -= 10
    if headers.h2 > 10:
        score -= 10
    if headers.h3 == 0:
        score -= 5
    if headers.h3 > 15:
        score -= 5

    return _clamp(score)


def score_keywords(keywords: Iterable[KeywordDensity]) -> int:
    keywords = real_keywords(keywords)

    score = 100
    if not keywords:
        score -= 50

    for keyword in keywords:
        if keyword.density > 5:
            score -= 20
        if keyword.density < 0.5:
            score -= 10

    return _clamp(score)


def security_rating(flags: TechnicalFlags) -> str:
    if flags.has_https and flags.has_caching:
        return "A+"
    if flags.has_https:
        return "A"
    if flags.has_caching:
        return "B"
    return "C"


def score_performance(flags: TechnicalFlags, content_size: int) -> PerformanceScore:
    """
    Score overall and mobile performance from technical flags and page size.

    Only the largest matching size tier applies. Both scores are clamped
    and rounded once, after every adjustment.
    """
    overall = 100
    mobile = 100

    for threshold, overall_penalty, mobile_penalty in SIZE_TIERS:
        if content_size > threshold:
            overall -= overall_penalty
            mobile -= mobile_penalty
            break

    if not flags.has_viewport:
        mobile -= 50
        overall -= 20

    if not flags.has_canonical:
        overall -= 10
    if not flags.has_structured_data:
        overall -= 15
    if not flags.has_open_graph:
        overall -= 10
    if not flags.has_twitter_cards:
        overall -= 5

    if flags.has_https:
        overall += 10
        mobile += 5
    if flags.has_caching:
        overall += 5
        mobile += 5

    return PerformanceScore(
        overall=_clamp(overall),
        mobile=_clamp(mobile),
        security=security_rating(flags),
        load_time=f"{content_size / MIB:.2f}MB",
    )


def score_page(signals: PageSignals) -> tuple[ScoreSet, PerformanceScore]:
    """Compute the four component scores and the performance score."""
    scores = ScoreSet(
        title=score_title(signals.title),
        description=score_description(signals.description),
        headers=score_headers(signals.header_counts),
        keywords=score_keywords(signals.keyword_densities),
    )
    performance = score_performance(
        signals.technical_flags, signals.content_size_bytes
    )
    return scores, performance
