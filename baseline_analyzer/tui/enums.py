from enum import Enum

from baseline_analyzer.models import DuplicateKind, RecommendationPriority


class ReportStyle(str, Enum):
    """Border and text styles keyed by what a report section shows."""

    OVERVIEW = "blue"
    BREAKDOWN = "cyan"
    DUPLICATES = "magenta"
    ERROR = "red"
    WARNING = "yellow"
    PASSED = "green"
    MUTED = "dim"


_DUPLICATE_KIND_STYLE = {
    DuplicateKind.INTRA_DOCUMENT: ReportStyle.WARNING,
    DuplicateKind.CROSS_DOCUMENT: ReportStyle.ERROR,
}

_PRIORITY_STYLE = {
    RecommendationPriority.HIGH: ReportStyle.ERROR,
    RecommendationPriority.MEDIUM: ReportStyle.WARNING,
    RecommendationPriority.LOW: ReportStyle.MUTED,
}


def duplicate_kind_style(kind: str) -> ReportStyle:
    return _DUPLICATE_KIND_STYLE[DuplicateKind(kind)]


def priority_style(priority: str) -> ReportStyle:
    return _PRIORITY_STYLE[RecommendationPriority(priority)]
