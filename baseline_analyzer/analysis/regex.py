"""Evaluate delimited PCRE-style patterns (``#body#flags``) with Python's ``re``."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from baseline_analyzer.errors import RegexEvaluationWarning
from baseline_analyzer.models import NormalizedRule

logger = logging.getLogger(__name__)

# The body ends at the first unescaped delimiter; whatever follows is modifiers.
_DELIMITED_RE = re.compile(r"^([#/~!%@|])((?:\\.|(?!\1).)*)\1(.*)$", re.DOTALL)

_MODIFIER_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
# Accepted by PCRE but meaningless for a str pattern in Python.
_IGNORED_MODIFIERS = frozenset("uDU")


def is_delimited(pattern: str) -> bool:
    return _DELIMITED_RE.match(pattern) is not None


def split_delimited(pattern: str) -> Optional[tuple[str, str, str]]:
    match = _DELIMITED_RE.match(pattern)
    if match is None:
        return None
    return match.group(1), match.group(2), match.group(3)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a delimited pattern, raising ``re.error`` when it is not valid."""
    parts = split_delimited(pattern)
    if parts is None:
        raise re.error(f"missing or unbalanced delimiter in {pattern!r}")
    _, body, modifiers = parts

    flags = 0
    for modifier in modifiers:
        if modifier in _MODIFIER_FLAGS:
            flags |= _MODIFIER_FLAGS[modifier]
        elif modifier not in _IGNORED_MODIFIERS:
            raise re.error(f"unknown modifier {modifier!r}")
    return re.compile(body, flags)


def probe_rule(rule: NormalizedRule, probe: str) -> Optional[RegexEvaluationWarning]:
    if not is_delimited(rule.pattern):
        return None
    try:
        compile_pattern(rule.pattern).search(probe)
    except re.error as exc:
        return RegexEvaluationWarning(
            source=rule.source_document,
            index=rule.index,
            pattern=rule.pattern,
            detail=str(exc),
        )
    return None


def probe_patterns(
    rules: Iterable[NormalizedRule], probe: str
) -> list[RegexEvaluationWarning]:
    warnings: list[RegexEvaluationWarning] = []
    for rule in rules:
        warning = probe_rule(rule, probe)
        if warning is not None:
            logger.warning("%s", warning)
            warnings.append(warning)
    return warnings
