"""Exact duplicate detection plus an advisory near-duplicate pass.

Duplicates are grouped by exact (already trimmed) pattern text; no regex
equivalence is attempted. Groups keep occurrences in first-seen order:
documents in load order, entries in source order.

The similarity pass compares distinct patterns from different documents
with difflib and only ever produces warnings.
"""

from __future__ import annotations

import difflib
import logging
from typing import Iterable, Sequence

from baseline_analyzer.errors import SimilarityWarning
from baseline_analyzer.models import DuplicateGroup, NormalizedRule

logger = logging.getLogger(__name__)


def group_occurrences(rules: Iterable[NormalizedRule]) -> dict[str, list[str]]:
    """Map pattern -> ordered list of source documents, one item per occurrence."""
    occurrences: dict[str, list[str]] = {}
    for rule in rules:
        occurrences.setdefault(rule.pattern, []).append(rule.source_document)
    return occurrences


def find_duplicates(rules: Iterable[NormalizedRule]) -> list[DuplicateGroup]:
    groups: list[DuplicateGroup] = []
    for position, (pattern, documents) in enumerate(group_occurrences(rules).items()):
        if len(documents) < 2:
            continue
        groups.append(
            DuplicateGroup(pattern=pattern, documents=tuple(documents), first_seen=position)
        )
    logger.debug("Found %d duplicate groups", len(groups))
    return groups


def find_similar_patterns(
    rules: Sequence[NormalizedRule], threshold: float
) -> list[SimilarityWarning]:
    seen: set[tuple[str, str]] = set()
    items: list[tuple[str, str]] = []
    for rule in rules:
        key = (rule.pattern, rule.source_document)
        if key not in seen:
            seen.add(key)
            items.append(key)

    warnings: list[SimilarityWarning] = []
    for i, (pattern_a, document_a) in enumerate(items):
        for pattern_b, document_b in items[i + 1 :]:
            if document_a == document_b or pattern_a == pattern_b:
                continue
            matcher = difflib.SequenceMatcher(None, pattern_a, pattern_b)
            # real_quick_ratio() and quick_ratio() are upper bounds on ratio().
            if matcher.real_quick_ratio() * 100 <= threshold:
                continue
            if matcher.quick_ratio() * 100 <= threshold:
                continue
            percent = matcher.ratio() * 100
            if percent <= threshold:
                continue
            warnings.append(
                SimilarityWarning(
                    source=document_a,
                    other_source=document_b,
                    pattern=pattern_a,
                    other_pattern=pattern_b,
                    similarity=percent,
                )
            )
    logger.debug("Similarity pass flagged %d pattern pairs", len(warnings))
    return warnings
