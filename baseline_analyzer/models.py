from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from baseline_analyzer.constants import (
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_TOP_N,
    REGEX_PROBE_STRING,
)
from baseline_analyzer.errors import BaselineAnalyzerWarning, BaselineDocumentError


class RuleCategory(str, Enum):
    ELOQUENT = "eloquent"
    FILAMENT = "filament"
    LIVEWIRE = "livewire"
    HTTP = "http"
    COLLECTION = "collection"
    FACADE = "facade"
    OTHER = "other"


class ComplexityBucket(str, Enum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    VERY_COMPLEX = "very_complex"


class DuplicateKind(str, Enum):
    INTRA_DOCUMENT = "intra-document duplicate"
    CROSS_DOCUMENT = "cross-document conflict"


class OptimizationKind(str, Enum):
    COMPLEX = "complex"
    INEFFICIENT = "inefficient"
    VAGUE = "vague"


class RecommendationPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class NormalizedRule:
    pattern: str
    paths: frozenset[str]
    source_document: str
    index: int
    count: Optional[int] = None
    category: RuleCategory = RuleCategory.OTHER
    complexity: int = 0


@dataclass(frozen=True)
class DuplicateGroup:
    pattern: str
    documents: tuple[str, ...]
    first_seen: int

    @property
    def count(self) -> int:
        return len(self.documents)

    @property
    def kind(self) -> DuplicateKind:
        if len(set(self.documents)) > 1:
            return DuplicateKind.CROSS_DOCUMENT
        return DuplicateKind.INTRA_DOCUMENT

    def as_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "documents": list(self.documents),
            "count": self.count,
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class Optimization:
    kind: OptimizationKind
    pattern: str
    documents: tuple[str, ...]
    suggestion: str
    complexity: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "pattern": self.pattern,
            "documents": list(self.documents),
            "suggestion": self.suggestion,
            "complexity": self.complexity,
        }


@dataclass(frozen=True)
class Recommendation:
    type: str
    priority: RecommendationPriority
    title: str
    description: str
    action: str
    patterns: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.type,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "action": self.action,
        }
        if self.patterns:
            payload["patterns"] = list(self.patterns)
        return payload


@dataclass(frozen=True)
class AnalysisOptions:
    top_n: Optional[int] = DEFAULT_TOP_N
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    probe_string: str = REGEX_PROBE_STRING
    include_similarity: bool = False


def _group_by_source(items: tuple[BaselineDocumentError, ...]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for item in items:
        grouped.setdefault(item.source, []).append(item.message)
    return grouped


@dataclass(frozen=True)
class AnalysisReport:
    files_count: int
    total_patterns: int
    unique_patterns: int
    duplicate_patterns: int
    duplicate_percentage: float
    categories: Mapping[str, int]
    complexity: Mapping[str, int]
    most_duplicated: tuple[DuplicateGroup, ...]
    errors: tuple[BaselineDocumentError, ...] = ()
    warnings: tuple[BaselineAnalyzerWarning, ...] = ()
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)

    def is_valid(self) -> bool:
        return not self.errors

    def errors_by_document(self) -> dict[str, list[str]]:
        return _group_by_source(self.errors)

    def warnings_by_document(self) -> dict[str, list[str]]:
        return _group_by_source(self.warnings)

    def as_dict(self) -> dict[str, Any]:
        return {
            "files_count": self.files_count,
            "total_patterns": self.total_patterns,
            "unique_patterns": self.unique_patterns,
            "duplicate_patterns": self.duplicate_patterns,
            "duplicate_percentage": self.duplicate_percentage,
            "categories": dict(self.categories),
            "complexity": dict(self.complexity),
            "most_duplicated": [group.as_dict() for group in self.most_duplicated],
            "errors": self.errors_by_document(),
            "warnings": self.warnings_by_document(),
            "recommendations": [item.as_dict() for item in self.recommendations],
        }
