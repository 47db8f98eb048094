import pytest

from analyzers.scoring import (
    MIB,
    score_description,
    score_headers,
    score_keywords,
    score_page,
    score_performance,
    score_title,
    security_rating,
)
from analyzers.signals import (
    NO_KEYWORDS,
    HeaderCounts,
    KeywordDensity,
    PageSignals,
    TechnicalFlags,
)

# Everything present except HTTPS and caching
NEUTRAL_FLAGS = TechnicalFlags(
    has_viewport=True,
    has_canonical=True,
    has_structured_data=True,
    has_open_graph=True,
    has_twitter_cards=True,
)
ALL_FLAGS = TechnicalFlags(
    has_viewport=True,
    has_https=True,
    has_caching=True,
    has_canonical=True,
    has_structured_data=True,
    has_open_graph=True,
    has_twitter_cards=True,
)


class TestTitleScore:
    def test_empty_title_scores_zero(self):
        assert score_title("") == 0

    def test_ideal_title(self):
        assert score_title("Fresh Pasta Recipes for Busy Weeknights") == 100

    def test_65_characters_loses_only_the_first_length_tier(self):
        assert score_title("A" + "b" * 64) == 80

    def test_75_characters_loses_both_length_tiers(self):
        assert score_title("A" + "b" * 74) == 60

    def test_short_title(self):
        assert score_title("Hi There") == 70

    def test_case_penalties(self):
        assert score_title("a" * 40) == 95
        assert score_title("A" * 40) == 90

    def test_no_alphanumerics(self):
        # short, no alphanumerics, and both case checks hold for "!!!"
        assert score_title("!!!") == 45


class TestDescriptionScore:
    def test_empty_description_scores_zero(self):
        assert score_description("") == 0

    def test_ideal_description(self):
        assert score_description("Quick Pasta " * 11) == 100

    def test_long_lowercase_without_spaces(self):
        assert score_description("x" * 200) == 55

    def test_short_description(self):
        assert score_description("Short but Fine") == 70


class TestHeaderScore:
    def test_ideal_structure(self):
        assert score_headers(HeaderCounts(h1=1, h2=2, h3=1)) == 100

    def test_missing_everything(self):
        assert score_headers(HeaderCounts()) == 45

    def test_too_many_of_everything(self):
        assert score_headers(HeaderCounts(h1=3, h2=11, h3=16)) == 65


class TestKeywordScore:
    def test_empty_list(self):
        assert score_keywords([]) == 50

    def test_placeholder_counts_as_empty(self):
        assert score_keywords([KeywordDensity(NO_KEYWORDS, 0)]) == 50

    def test_per_keyword_deductions_accumulate(self):
        keywords = [
            KeywordDensity("pasta", 6.0),
            KeywordDensity("sauce", 3.0),
            KeywordDensity("water", 0.4),
        ]
        assert score_keywords(keywords) == 70

    def test_clamped_at_zero(self):
        keywords = [KeywordDensity(f"word{i}", 20.0) for i in range(5)]
        keywords.append(KeywordDensity("extra", 0.1))
        assert score_keywords(keywords) == 0


class TestPerformanceScore:
    @pytest.mark.parametrize(
        "size, overall, mobile",
        [
            (MIB, 100, 100),
            (MIB + 1, 95, 90),
            (3 * MIB, 85, 80),
            (6 * MIB, 70, 60),
        ],
    )
    def test_only_one_size_tier_applies(self, size, overall, mobile):
        result = score_performance(NEUTRAL_FLAGS, size)
        assert (result.overall, result.mobile) == (overall, mobile)

    def test_nothing_present(self):
        result = score_performance(TechnicalFlags(), 0)

        assert result.overall == 40
        assert result.mobile == 50
        assert result.security == "C"
        assert result.load_time == "0.00MB"

    def test_bonuses_are_clamped(self):
        result = score_performance(ALL_FLAGS, 0)
        assert (result.overall, result.mobile) == (100, 100)

    def test_bonuses_offset_size_penalty(self):
        result = score_performance(ALL_FLAGS, 3 * MIB)

        assert (result.overall, result.mobile) == (100, 90)
        assert result.load_time == "3.00MB"

    @pytest.mark.parametrize(
        "https, caching, rating",
        [(True, True, "A+"), (True, False, "A"), (False, True, "B"), (False, False, "C")],
    )
    def test_security_rating(self, https, caching, rating):
        assert security_rating(TechnicalFlags(has_https=https, has_caching=caching)) == rating


def test_score_page_is_deterministic():
    signals = PageSignals(
        title="Fresh Pasta Recipes for Busy Weeknights",
        description="Quick Pasta " * 11,
        header_counts=HeaderCounts(h1=1, h2=2, h3=1),
        keyword_densities=(KeywordDensity("pasta", 2.0),),
        technical_flags=ALL_FLAGS,
        content_size_bytes=2048,
    )

    first = score_page(signals)
    assert first == score_page(signals)

    scores, performance = first
    assert (scores.title, scores.description, scores.headers, scores.keywords) == (100, 100, 100, 100)
    assert performance.security == "A+"
