"""Recommendation engine that evaluates rules against page signals."""

import logging

from analyzers.signals import PageSignals
from recommendations.rules import ALL_RULES, Recommendation, Rule

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Generates recommendations by evaluating rules against PageSignals.

    The engine walks the rule table in order and keeps every finding in
    that order. Findings are neither deduplicated nor sorted by impact, and
    they are independent of the page scores.
    """

    def __init__(self, rules: list[Rule] | None = None):
        self.rules = ALL_RULES if rules is None else rules

    def generate(self, signals: PageSignals) -> list[Recommendation]:
        """
        Generate recommendations for one page.

        Args:
            signals: Extracted page signals

        Returns:
            Findings in rule evaluation order
        """
        recommendations = []

        for rule in self.rules:
            try:
                findings = rule.evaluate(signals)
            except Exception as e:
                logger.warning(f"Error evaluating rule {rule.id}: {e}")
                continue

            if findings:
                logger.debug(f"Rule triggered: {rule.id}")
                recommendations.extend(findings)

        logger.info(f"Generated {len(recommendations)} recommendations")
        return recommendations


def generate_recommendations(signals: PageSignals) -> list[Recommendation]:
    """Convenience function to generate recommendations for a page."""
    engine = RecommendationEngine()
    return engine.generate(signals)
