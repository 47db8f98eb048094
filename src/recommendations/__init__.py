"""Signalboard recommendations package."""

from recommendations.engine import RecommendationEngine, generate_recommendations
from recommendations.rules import ALL_RULES, KeywordRule, Recommendation, Rule

__all__ = [
    "RecommendationEngine",
    "generate_recommendations",
    "ALL_RULES",
    "KeywordRule",
    "Recommendation",
    "Rule",
]
