"""HTML signal extraction."""

import logging
import re
from collections import Counter

from bs4 import BeautifulSoup

from analyzers.signals import (
    NO_DESCRIPTION,
    NO_KEYWORDS,
    NO_TITLE,
    HeaderCounts,
    KeywordDensity,
    PageSignals,
    TechnicalFlags,
)
from errors import ParseError

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset(
    {
        "this",
        "that",
        "with",
        "from",
        "have",
        "were",
        "what",
        "when",
        "your",
        "will",
        "about",
        "they",
        "their",
    }
)

MIN_WORD_LENGTH = 4
TOP_KEYWORDS = 5

_PUNCTUATION = re.compile(r"[^\w\s]")


def extract(
    html: str, request_url: str, response_headers: dict | None = None
) -> PageSignals:
    """
    Parse an HTML document into PageSignals.

    Args:
        html: Raw HTML as fetched
        request_url: The URL the user asked for (not the proxy URL)
        response_headers: Headers of the fetch response, used for caching

    Raises:
        ParseError: If the document cannot be parsed or has no body
    """
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as e:
        raise ParseError(f"Could not parse HTML: {e}") from e

    if soup.body is None:
        raise ParseError("Invalid HTML content received")

    words = tokenize(soup.body.get_text(" "))

    return PageSignals(
        title=_extract_title(soup),
        description=_extract_description(soup),
        header_counts=HeaderCounts(
            h1=len(soup.find_all("h1")),
            h2=len(soup.find_all("h2")),
            h3=len(soup.find_all("h3")),
        ),
        body_word_count=len(words),
        keyword_densities=keyword_densities(words),
        technical_flags=_extract_flags(soup, html, request_url, response_headers or {}),
        content_size_bytes=len(html),
    )


def tokenize(text: str) -> list[str]:
    """Lower-case, strip punctuation, and drop short and stop words."""
    cleaned = _PUNCTUATION.sub("", text.lower())
    return [
        word
        for word in cleaned.split()
        if len(word) >= MIN_WORD_LENGTH and word not in STOP_WORDS
    ]


def keyword_densities(words: list[str]) -> tuple[KeywordDensity, ...]:
    """Top keywords by share of the filtered tokens, as percentages."""
    if not words:
        return (KeywordDensity(word=NO_KEYWORDS, density=0),)

    total = len(words)
    ranked = sorted(
        Counter(words).items(), key=lambda item: item[1], reverse=True
    )
    return tuple(
        KeywordDensity(word=word, density=count / total * 100)
        for word, count in ranked[:TOP_KEYWORDS]
    )


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag:
        title = " ".join(title_tag.get_text().split())
        if title:
            return title

    h1 = soup.find("h1")
    if h1:
        text = " ".join(h1.get_text().split())
        if text:
            return text

    return NO_TITLE


def _extract_description(soup: BeautifulSoup) -> str:
    for attrs in ({"name": "description"}, {"property": "og:description"}):
        meta = soup.find("meta", attrs=attrs)
        content = meta.get("content") if meta else None
        if content:
            return content
    return NO_DESCRIPTION


def _extract_flags(
    soup: BeautifulSoup, html: str, request_url: str, headers: dict
) -> TechnicalFlags:
    header_values = {name.lower(): value for name, value in headers.items()}
    return TechnicalFlags(
        has_viewport=soup.find("meta", attrs={"name": "viewport"}) is not None,
        has_https=request_url.startswith("https"),
        has_caching=bool(header_values.get("cache-control")),
        has_canonical=soup.find("link", rel="canonical") is not None,
        has_structured_data="application/ld+json" in html,
        has_open_graph=soup.select_one('meta[property^="og:"]') is not None,
        has_twitter_cards=soup.select_one('meta[name^="twitter:"]') is not None,
    )
