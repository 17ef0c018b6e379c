"""Parse baseline documents (NEON written in its YAML-compatible subset)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from baseline_analyzer.baselines.models import RuleDocument
from baseline_analyzer.constants import IGNORE_ERRORS_KEY, PARAMETERS_KEY
from baseline_analyzer.errors import BaselineStructureError, BaselineSyntaxError

logger = logging.getLogger(__name__)

BASELINE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [PARAMETERS_KEY],
    "properties": {
        PARAMETERS_KEY: {
            "type": "object",
            "required": [IGNORE_ERRORS_KEY],
            "properties": {IGNORE_ERRORS_KEY: {"type": "array"}},
        }
    },
}

_VALIDATOR = Draft202012Validator(BASELINE_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def load_document(source: str, text: str, source_path: Path | None = None) -> RuleDocument:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise BaselineSyntaxError(source, str(exc).replace("\n", " ")) from exc

    error = next(iter(_VALIDATOR.iter_errors(raw)), None)
    if error is not None:
        raise BaselineStructureError(source, format_schema_error(error))

    entries = tuple(raw[PARAMETERS_KEY][IGNORE_ERRORS_KEY])
    logger.debug("Loaded %s with %d ignoreErrors entries", source, len(entries))
    return RuleDocument(name=source, entries=entries, source_path=source_path)


def load_document_file(path: Path) -> RuleDocument:
    text = path.read_text(encoding="utf-8")
    return load_document(path.name, text, source_path=path)
