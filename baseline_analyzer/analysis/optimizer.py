"""Advisory optimization hints and a shared-baseline consolidation plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import yaml

from baseline_analyzer.analysis.classifier import pattern_complexity
from baseline_analyzer.analysis.detector import group_occurrences
from baseline_analyzer.constants import (
    COMMON_PATTERN_MIN_DOCUMENTS,
    IGNORE_ERRORS_KEY,
    OPTIMIZE_COMPLEXITY_THRESHOLD,
    PARAMETERS_KEY,
    VAGUE_WILDCARD_LIMIT,
)
from baseline_analyzer.models import NormalizedRule, Optimization, OptimizationKind


@dataclass(frozen=True)
class ConsolidationPlan:
    common: tuple[str, ...]
    per_document: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "common": list(self.common),
            "per_document": {name: list(items) for name, items in self.per_document.items()},
        }


def _documents(occurrences: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(occurrences))


def find_optimizations(rules: Sequence[NormalizedRule]) -> list[Optimization]:
    optimizations: list[Optimization] = []
    for pattern, occurrences in group_occurrences(rules).items():
        documents = _documents(occurrences)
        complexity = pattern_complexity(pattern)

        if complexity > OPTIMIZE_COMPLEXITY_THRESHOLD:
            optimizations.append(
                Optimization(
                    kind=OptimizationKind.COMPLEX,
                    pattern=pattern,
                    documents=documents,
                    suggestion="Consider breaking down this complex pattern",
                    complexity=complexity,
                )
            )
        if ".+" in pattern and ".*" in pattern:
            optimizations.append(
                Optimization(
                    kind=OptimizationKind.INEFFICIENT,
                    pattern=pattern,
                    documents=documents,
                    suggestion="Mix of .+ and .* can be inefficient",
                    complexity=complexity,
                )
            )
        if pattern.count(".+") > VAGUE_WILDCARD_LIMIT:
            optimizations.append(
                Optimization(
                    kind=OptimizationKind.VAGUE,
                    pattern=pattern,
                    documents=documents,
                    suggestion="Multiple .+ wildcards could be more specific",
                    complexity=complexity,
                )
            )
    return optimizations


def consolidation_plan(rules: Sequence[NormalizedRule]) -> ConsolidationPlan:
    common: list[str] = []
    per_document: dict[str, list[str]] = {}
    for pattern, occurrences in group_occurrences(rules).items():
        documents = _documents(occurrences)
        if len(documents) >= COMMON_PATTERN_MIN_DOCUMENTS:
            common.append(pattern)
            continue
        for name in documents:
            per_document.setdefault(name, []).append(pattern)
    return ConsolidationPlan(
        common=tuple(common),
        per_document={name: tuple(items) for name, items in per_document.items()},
    )


def common_baseline_yaml(patterns: Sequence[str]) -> str:
    payload = {PARAMETERS_KEY: {IGNORE_ERRORS_KEY: list(patterns)}}
    return yaml.dump(payload, default_flow_style=False, sort_keys=False, allow_unicode=True)
