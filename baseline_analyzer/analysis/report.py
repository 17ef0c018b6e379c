"""Aggregate classified rules and duplicate groups into an AnalysisReport."""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Optional, Sequence

from baseline_analyzer.analysis.classifier import complexity_bucket
from baseline_analyzer.constants import ORGANIZATION_DOCUMENT_LIMIT, RECOMMENDATION_EXAMPLES
from baseline_analyzer.errors import BaselineAnalyzerWarning, BaselineDocumentError
from baseline_analyzer.models import (
    AnalysisReport,
    ComplexityBucket,
    DuplicateGroup,
    NormalizedRule,
    Recommendation,
    RecommendationPriority,
    RuleCategory,
)


def duplicate_percentage(duplicate_count: int, unique_count: int) -> float:
    if unique_count == 0:
        return 0.0
    return round(duplicate_count / unique_count * 100, 2)


def rank_duplicates(
    groups: Sequence[DuplicateGroup], top_n: Optional[int] = None
) -> list[DuplicateGroup]:
    ranked = sorted(groups, key=lambda group: (-group.count, group.first_seen))
    if top_n is None:
        return ranked
    return ranked[:top_n]


def _category_counts(rules: Sequence[NormalizedRule]) -> dict[str, int]:
    counts = Counter(rule.category for rule in rules)
    return {category.value: counts[category] for category in RuleCategory if counts[category]}


def _complexity_counts(rules: Sequence[NormalizedRule]) -> dict[str, int]:
    counts = Counter(complexity_bucket(rule.complexity) for rule in rules)
    return {bucket.value: counts[bucket] for bucket in ComplexityBucket}


def _unique_patterns(rules: Sequence[NormalizedRule]) -> list[str]:
    return list(dict.fromkeys(rule.pattern for rule in rules))


def build_recommendations(
    files_count: int,
    rules: Sequence[NormalizedRule],
    groups: Sequence[DuplicateGroup],
    percentage: float,
) -> list[Recommendation]:
    recommendations: list[Recommendation] = []

    if groups:
        recommendations.append(
            Recommendation(
                type="duplicates",
                priority=RecommendationPriority.HIGH,
                title="Remove duplicate patterns",
                description=(
                    f"Found {len(groups)} duplicate patterns ({percentage:.2f}% of "
                    "unique patterns). Consider consolidating common patterns into "
                    "shared baseline files."
                ),
                action="Create common baseline files for shared patterns",
                patterns=tuple(group.pattern for group in groups[:RECOMMENDATION_EXAMPLES]),
            )
        )

    very_complex = _unique_patterns(
        [
            rule
            for rule in rules
            if complexity_bucket(rule.complexity) == ComplexityBucket.VERY_COMPLEX
        ]
    )
    if very_complex:
        recommendations.append(
            Recommendation(
                type="complexity",
                priority=RecommendationPriority.MEDIUM,
                title="Optimize complex regex patterns",
                description=(
                    f"Found {len(very_complex)} very complex regex patterns that may "
                    "impact performance. Consider simplifying or breaking them down."
                ),
                action="Review and optimize complex patterns",
                patterns=tuple(very_complex[:RECOMMENDATION_EXAMPLES]),
            )
        )

    if files_count > ORGANIZATION_DOCUMENT_LIMIT:
        recommendations.append(
            Recommendation(
                type="organization",
                priority=RecommendationPriority.LOW,
                title="Consider file organization",
                description=(
                    f"With {files_count} baseline files, consider organizing patterns "
                    "by level-specific includes."
                ),
                action="Create level-based baseline organization",
            )
        )

    return recommendations


def build_report(
    files_count: int,
    rules: Sequence[NormalizedRule],
    groups: Sequence[DuplicateGroup],
    top_n: Optional[int] = None,
    errors: Sequence[BaselineDocumentError] = (),
    warnings: Sequence[BaselineAnalyzerWarning] = (),
) -> AnalysisReport:
    unique_count = len(_unique_patterns(rules))
    percentage = duplicate_percentage(len(groups), unique_count)
    return AnalysisReport(
        files_count=files_count,
        total_patterns=len(rules),
        unique_patterns=unique_count,
        duplicate_patterns=len(groups),
        duplicate_percentage=percentage,
        categories=MappingProxyType(_category_counts(rules)),
        complexity=MappingProxyType(_complexity_counts(rules)),
        most_duplicated=tuple(rank_duplicates(groups, top_n)),
        errors=tuple(errors),
        warnings=tuple(warnings),
        recommendations=tuple(
            build_recommendations(files_count, rules, groups, percentage)
        ),
    )
