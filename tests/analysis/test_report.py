"""Tests for report aggregation."""

import dataclasses

import pytest

from baseline_analyzer.analysis.classifier import classify
from baseline_analyzer.analysis.detector import find_duplicates
from baseline_analyzer.analysis.report import (
    build_report,
    duplicate_percentage,
    rank_duplicates,
)
from baseline_analyzer.errors import RuleValidationError
from baseline_analyzer.models import DuplicateGroup, NormalizedRule


def _rule(pattern: str, document: str, index: int = 0) -> NormalizedRule:
    return classify(
        NormalizedRule(pattern=pattern, paths=frozenset(), source_document=document, index=index)
    )


def test_duplicate_percentage() -> None:
    assert duplicate_percentage(1, 3) == 33.33
    assert duplicate_percentage(2, 4) == 50.0
    assert duplicate_percentage(0, 0) == 0


def test_rank_top_one_of_five_three_three() -> None:
    groups = [
        DuplicateGroup(pattern="#three-a#", documents=("a", "b", "c"), first_seen=0),
        DuplicateGroup(pattern="#five#", documents=("a", "b", "c", "d", "e"), first_seen=1),
        DuplicateGroup(pattern="#three-b#", documents=("a", "b", "c"), first_seen=2),
    ]
    assert [group.pattern for group in rank_duplicates(groups, 1)] == ["#five#"]
    assert [group.pattern for group in rank_duplicates(groups)] == [
        "#five#",
        "#three-a#",
        "#three-b#",
    ]
    reordered = [groups[2], groups[1], groups[0]]
    assert [group.pattern for group in rank_duplicates(reordered)] == [
        "#five#",
        "#three-a#",
        "#three-b#",
    ]


def test_rank_top_zero_is_empty() -> None:
    groups = [DuplicateGroup(pattern="#a#", documents=("a", "b"), first_seen=0)]
    assert rank_duplicates(groups, 0) == []


def test_conservation_and_histograms() -> None:
    rules = [
        _rule(r"#Call to an undefined method .+::whereEmail\(\)#", "A"),
        _rule(r"#Filament\\Forms#", "A", 1),
        _rule(r"#Filament\\Forms#", "A", 2),
        _rule(r"#Call to an undefined method .+::whereEmail\(\)#", "B"),
        _rule("#.*#", "B", 1),
    ]
    groups = find_duplicates(rules)
    report = build_report(files_count=2, rules=rules, groups=groups, top_n=10)

    assert report.files_count == 2
    assert report.total_patterns == 5
    assert report.unique_patterns == 3
    assert report.duplicate_patterns == 2
    assert report.duplicate_percentage == 66.67
    assert report.categories == {"filament": 2, "other": 3}
    assert report.complexity == {
        "simple": 5,
        "moderate": 0,
        "complex": 0,
        "very_complex": 0,
    }
    assert sum(report.categories.values()) == report.total_patterns
    assert sum(report.complexity.values()) == report.total_patterns


def test_empty_report() -> None:
    report = build_report(files_count=1, rules=[], groups=[])
    payload = report.as_dict()
    assert payload["total_patterns"] == 0
    assert payload["unique_patterns"] == 0
    assert payload["duplicate_patterns"] == 0
    assert payload["duplicate_percentage"] == 0
    assert payload["categories"] == {}
    assert payload["most_duplicated"] == []
    assert payload["recommendations"] == []


def test_as_dict_shape_and_grouped_errors() -> None:
    rules = [_rule("#^Foo#", "A"), _rule("#^Foo#", "B")]
    errors = [
        RuleValidationError("A", 3, "Empty pattern"),
        RuleValidationError("B", 0, "Structured pattern missing 'message' key"),
        RuleValidationError("A", 5, "Empty pattern"),
    ]
    report = build_report(
        files_count=2, rules=rules, groups=find_duplicates(rules), errors=errors
    )
    payload = report.as_dict()
    assert set(payload) == {
        "files_count",
        "total_patterns",
        "unique_patterns",
        "duplicate_patterns",
        "duplicate_percentage",
        "categories",
        "complexity",
        "most_duplicated",
        "errors",
        "warnings",
        "recommendations",
    }
    assert payload["most_duplicated"] == [
        {
            "pattern": "#^Foo#",
            "documents": ["A", "B"],
            "count": 2,
            "kind": "cross-document conflict",
        }
    ]
    assert payload["errors"] == {
        "A": ["Index 3: Empty pattern", "Index 5: Empty pattern"],
        "B": ["Index 0: Structured pattern missing 'message' key"],
    }
    assert not report.is_valid()


def test_recommendations() -> None:
    very_complex = "#" + "(a|b)+" * 11 + "#"
    rules = [_rule("#^Foo#", "A"), _rule("#^Foo#", "B"), _rule(very_complex, "C")]
    report = build_report(files_count=11, rules=rules, groups=find_duplicates(rules))
    kinds = [item.type for item in report.recommendations]
    assert kinds == ["duplicates", "complexity", "organization"]
    assert report.recommendations[0].patterns == ("#^Foo#",)
    assert report.recommendations[1].patterns == (very_complex,)
    assert report.recommendations[2].patterns == ()


def test_report_is_read_only() -> None:
    rules = [_rule("#^Foo$#", "A"), _rule("#^Foo$#", "B")]
    report = build_report(files_count=2, rules=rules, groups=find_duplicates(rules))

    with pytest.raises(TypeError):
        report.categories["other"] = 99
    with pytest.raises(TypeError):
        report.complexity["simple"] = 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.total_patterns = 0
    assert isinstance(report.most_duplicated, tuple)
    assert report.as_dict()["categories"] == {"other": 2}
