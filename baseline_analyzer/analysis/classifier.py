"""Keyword categories and the metacharacter complexity heuristic.

The complexity score is a syntactic proxy for matching cost: it sums the
occurrences of ``+ * ? [ ( | \\`` in the pattern text. It is not a measured
execution cost.
"""

from __future__ import annotations

from dataclasses import replace

from baseline_analyzer.constants import (
    CATEGORY_KEYWORDS,
    COMPLEX_MAX,
    COMPLEXITY_METACHARACTERS,
    MODERATE_MAX,
    SIMPLE_MAX,
)
from baseline_analyzer.models import ComplexityBucket, NormalizedRule, RuleCategory


def categorize_pattern(pattern: str) -> RuleCategory:
    for keywords, category in CATEGORY_KEYWORDS:
        if any(keyword in pattern for keyword in keywords):
            return RuleCategory(category)
    return RuleCategory.OTHER


def pattern_complexity(pattern: str) -> int:
    return sum(pattern.count(char) for char in COMPLEXITY_METACHARACTERS)


def complexity_bucket(score: int) -> ComplexityBucket:
    if score <= SIMPLE_MAX:
        return ComplexityBucket.SIMPLE
    if score <= MODERATE_MAX:
        return ComplexityBucket.MODERATE
    if score <= COMPLEX_MAX:
        return ComplexityBucket.COMPLEX
    return ComplexityBucket.VERY_COMPLEX


def classify(rule: NormalizedRule) -> NormalizedRule:
    return replace(
        rule,
        category=categorize_pattern(rule.pattern),
        complexity=pattern_complexity(rule.pattern),
    )
