"""Turn raw ``ignoreErrors`` entries into canonical rules."""

from __future__ import annotations

from typing import Any, Optional

from baseline_analyzer.baselines.models import RuleDocument
from baseline_analyzer.errors import RuleValidationError
from baseline_analyzer.models import NormalizedRule


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__


def _normalize_paths(entry: dict[str, Any], source: str, index: int) -> frozenset[str]:
    if "paths" in entry:
        paths = entry["paths"]
        if not isinstance(paths, (list, tuple)):
            raise RuleValidationError(
                source, index, f"Pattern paths must be a sequence, got {_type_name(paths)}"
            )
        return frozenset(str(item) for item in paths)
    # PHPStan also accepts a single ``path`` key.
    path = entry.get("path")
    if path is None:
        return frozenset()
    if not isinstance(path, str):
        raise RuleValidationError(
            source, index, f"Pattern path must be a string, got {_type_name(path)}"
        )
    return frozenset({path})


def _normalize_count(entry: dict[str, Any], source: str, index: int) -> Optional[int]:
    if "count" not in entry:
        return None
    count = entry["count"]
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise RuleValidationError(
            source, index, f"Pattern count must be a non-negative integer, got {count!r}"
        )
    return count


def normalize_entry(entry: Any, source: str, index: int) -> NormalizedRule:
    if isinstance(entry, str):
        pattern = entry.strip()
        if not pattern:
            raise RuleValidationError(source, index, "Empty pattern")
        return NormalizedRule(
            pattern=pattern, paths=frozenset(), source_document=source, index=index
        )

    if not isinstance(entry, dict):
        raise RuleValidationError(
            source,
            index,
            f"Pattern must be a string or structured mapping, got {_type_name(entry)}",
        )

    if "message" not in entry:
        raise RuleValidationError(source, index, "Structured pattern missing 'message' key")
    message = entry["message"]
    if not isinstance(message, str):
        raise RuleValidationError(
            source, index, f"Pattern message must be a string, got {_type_name(message)}"
        )
    pattern = message.strip()
    if not pattern:
        raise RuleValidationError(source, index, "Empty pattern message")

    return NormalizedRule(
        pattern=pattern,
        paths=_normalize_paths(entry, source, index),
        source_document=source,
        index=index,
        count=_normalize_count(entry, source, index),
    )


def normalize_document(
    document: RuleDocument,
) -> tuple[list[NormalizedRule], list[RuleValidationError]]:
    rules: list[NormalizedRule] = []
    errors: list[RuleValidationError] = []
    for index, entry in enumerate(document.entries):
        try:
            rules.append(normalize_entry(entry, document.name, index))
        except RuleValidationError as exc:
            errors.append(exc)
    return rules, errors
