"""Single-pattern checks for correctness and common inefficiencies."""

from __future__ import annotations

import re
from dataclasses import dataclass

from baseline_analyzer.analysis.regex import compile_pattern, split_delimited

_BROAD_PATTERNS = frozenset({"#.*#", "#.+#"})
_UNESCAPED_DOT_RE = re.compile(r"[^\\]\.")
_GREEDY_RE = re.compile(r"\.[*+](?!\?)")
_LETTER_ESCAPE_RE = re.compile(r"\\[a-zA-Z0-9]")
_INNER_DOLLAR_RE = re.compile(r"(?<!\\)\$(?!$)")


@dataclass(frozen=True)
class PatternCheck:
    pattern: str
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def lint_pattern(pattern: str) -> PatternCheck:
    errors: list[str] = []
    warnings: list[str] = []

    parts = split_delimited(pattern)
    if pattern.startswith("#") and parts is None:
        errors.append("Regex pattern missing closing delimiter")
    elif parts is not None:
        try:
            compile_pattern(pattern)
        except re.error as exc:
            errors.append(f"Invalid regular expression ({exc})")

    if pattern in _BROAD_PATTERNS:
        errors.append("Pattern is too broad and will match everything")

    if "^" not in pattern and "$" not in pattern:
        warnings.append("Pattern lacks anchors (^ or $), may match unintended text")
    if _UNESCAPED_DOT_RE.search(pattern):
        warnings.append("Unescaped dot (.) found, will match any character")
    if _GREEDY_RE.search(pattern):
        warnings.append("Greedy quantifier found, consider using lazy quantifier (.*? or .+?)")
    if _LETTER_ESCAPE_RE.search(pattern):
        warnings.append("Possibly unnecessary escaping found")

    body = parts[1] if parts is not None else pattern
    if _INNER_DOLLAR_RE.search(body):
        warnings.append("Potentially unescaped dollar sign found")

    return PatternCheck(pattern=pattern, errors=tuple(errors), warnings=tuple(warnings))
