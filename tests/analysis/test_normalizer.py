"""Tests for entry normalization."""

import pytest

from baseline_analyzer.analysis.normalizer import normalize_document, normalize_entry
from baseline_analyzer.baselines.models import RuleDocument
from baseline_analyzer.errors import RuleValidationError
from baseline_analyzer.models import RuleCategory


def test_plain_string_is_trimmed_and_applies_everywhere() -> None:
    rule = normalize_entry("  #^Foo#  ", "a.neon", 0)
    assert rule.pattern == "#^Foo#"
    assert rule.paths == frozenset()
    assert rule.source_document == "a.neon"
    assert rule.index == 0
    assert rule.count is None
    assert rule.category == RuleCategory.OTHER
    assert rule.complexity == 0


def test_structured_entry() -> None:
    rule = normalize_entry(
        {"message": " #^Foo# ", "paths": ["app/*.php", "src/*.php"], "count": 3},
        "a.neon",
        4,
    )
    assert rule.pattern == "#^Foo#"
    assert rule.paths == frozenset({"app/*.php", "src/*.php"})
    assert rule.count == 3
    assert rule.index == 4


def test_structured_entry_single_path() -> None:
    rule = normalize_entry({"message": "#^Foo#", "path": "app/User.php"}, "a.neon", 0)
    assert rule.paths == frozenset({"app/User.php"})


def test_structured_entry_without_paths() -> None:
    rule = normalize_entry({"message": "#^Foo#"}, "a.neon", 0)
    assert rule.paths == frozenset()


@pytest.mark.parametrize(
    "entry, detail",
    [
        ("   ", "Empty pattern"),
        ({"paths": ["app/*.php"]}, "missing 'message'"),
        ({"message": "  "}, "Empty pattern message"),
        ({"message": 42}, "must be a string"),
        ({"message": "#^Foo#", "paths": "app/*.php"}, "paths must be a sequence"),
        ({"message": "#^Foo#", "count": -1}, "non-negative integer"),
        ({"message": "#^Foo#", "count": "two"}, "non-negative integer"),
        (12, "string or structured mapping"),
        (None, "got null"),
    ],
)
def test_invalid_entries(entry, detail: str) -> None:
    with pytest.raises(RuleValidationError) as info:
        normalize_entry(entry, "a.neon", 7)
    assert info.value.index == 7
    assert info.value.source == "a.neon"
    assert detail in info.value.detail


def test_normalize_document_keeps_valid_entries() -> None:
    document = RuleDocument(
        name="laravel-11.neon",
        entries=("#^One#", {"paths": ["app/*.php"]}, {"message": "#^Two#"}),
    )
    rules, errors = normalize_document(document)
    assert [rule.pattern for rule in rules] == ["#^One#", "#^Two#"]
    assert [rule.index for rule in rules] == [0, 2]
    assert len(errors) == 1
    assert errors[0].index == 1
    assert "Index 1" in str(errors[0])
