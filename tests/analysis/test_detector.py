"""Tests for duplicate grouping and the advisory similarity pass."""

from baseline_analyzer.analysis.detector import (
    find_duplicates,
    find_similar_patterns,
    group_occurrences,
)
from baseline_analyzer.models import DuplicateKind, NormalizedRule


def _rule(pattern: str, document: str, index: int = 0) -> NormalizedRule:
    return NormalizedRule(
        pattern=pattern, paths=frozenset(), source_document=document, index=index
    )


WHERE_EMAIL = r"#Call to an undefined method .+::whereEmail\(\)#"


def test_cross_document_conflict() -> None:
    rules = [_rule(WHERE_EMAIL, "A"), _rule("#^Other#", "A", 1), _rule(WHERE_EMAIL, "B")]
    groups = find_duplicates(rules)
    assert len(groups) == 1
    assert groups[0].pattern == WHERE_EMAIL
    assert groups[0].documents == ("A", "B")
    assert groups[0].count == 2
    assert groups[0].kind == DuplicateKind.CROSS_DOCUMENT


def test_intra_document_duplicate() -> None:
    rules = [_rule("#^Foo#", "A", 0), _rule("#^Foo#", "A", 3)]
    groups = find_duplicates(rules)
    assert len(groups) == 1
    assert groups[0].documents == ("A", "A")
    assert groups[0].kind == DuplicateKind.INTRA_DOCUMENT
    assert groups[0].as_dict()["kind"] == "intra-document duplicate"


def test_singletons_are_not_reported() -> None:
    rules = [_rule("#^Foo#", "A"), _rule("#^Bar#", "B")]
    assert find_duplicates(rules) == []


def test_matching_is_exact() -> None:
    rules = [_rule("#^Foo#", "A"), _rule("#^foo#", "B"), _rule("#^Foo#i", "C")]
    assert find_duplicates(rules) == []


def test_occurrences_keep_first_seen_order() -> None:
    rules = [
        _rule("#^B#", "one.neon"),
        _rule("#^A#", "one.neon", 1),
        _rule("#^A#", "two.neon"),
        _rule("#^B#", "three.neon"),
        _rule("#^B#", "one.neon", 2),
    ]
    occurrences = group_occurrences(rules)
    assert list(occurrences) == ["#^B#", "#^A#"]
    assert occurrences["#^B#"] == ["one.neon", "three.neon", "one.neon"]

    groups = find_duplicates(rules)
    assert [group.pattern for group in groups] == ["#^B#", "#^A#"]
    assert [group.first_seen for group in groups] == [0, 1]


def test_every_equal_pair_shares_a_group() -> None:
    patterns = ["#a#", "#b#", "#a#", "#c#", "#b#", "#a#"]
    rules = [_rule(pattern, f"doc{i}") for i, pattern in enumerate(patterns)]
    groups = {group.pattern: group for group in find_duplicates(rules)}
    assert set(groups) == {"#a#", "#b#"}
    assert groups["#a#"].documents == ("doc0", "doc2", "doc5")
    assert groups["#b#"].documents == ("doc1", "doc4")


def test_similarity_flags_near_duplicates_across_documents() -> None:
    rules = [
        _rule(r"#^Call to an undefined method App\\Models\\User::whereEmail\(\)$#", "A"),
        _rule(r"#^Call to an undefined method App\\Models\\User::whereName\(\)$#", "B"),
        _rule("#^Something entirely different#", "B", 1),
    ]
    warnings = find_similar_patterns(rules, threshold=80.0)
    assert len(warnings) == 1
    assert warnings[0].source == "A"
    assert warnings[0].other_source == "B"
    assert warnings[0].similarity > 80.0
    assert "% match" in str(warnings[0])


def test_similarity_skips_same_document_and_identical_patterns() -> None:
    rules = [
        _rule("#^Call to undefined method whereEmail#", "A"),
        _rule("#^Call to undefined method whereEmails#", "A", 1),
        _rule("#^Call to undefined method whereEmail#", "B"),
    ]
    warnings = find_similar_patterns(rules, threshold=80.0)
    # Only the A(whereEmails) / B(whereEmail) pair crosses documents with differing text.
    assert len(warnings) == 1
    assert warnings[0].pattern.endswith("whereEmails#")
    assert warnings[0].other_pattern.endswith("whereEmail#")


def test_similarity_respects_threshold() -> None:
    rules = [_rule("#^abcd#", "A"), _rule("#^abce#", "B")]
    assert find_similar_patterns(rules, threshold=99.0) == []
    assert len(find_similar_patterns(rules, threshold=50.0)) == 1
