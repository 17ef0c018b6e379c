"""Repository for baseline documents stored in one directory."""

from __future__ import annotations

from pathlib import Path

from baseline_analyzer.baselines.models import RuleDocument
from baseline_analyzer.baselines.parser import load_document
from baseline_analyzer.constants import DOCUMENT_SUFFIXES
from baseline_analyzer.errors import BaselineDirectoryError


class BaselineRepository:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def list_sources(self) -> list[Path]:
        if not self._root.exists() or not self._root.is_dir():
            raise BaselineDirectoryError(self._root)
        sources: list[Path] = []
        for child in sorted(self._root.iterdir()):
            if (
                child.is_file()
                and child.suffix in DOCUMENT_SUFFIXES
                and not child.name.startswith(".")
            ):
                sources.append(child)
        return sources

    def read_document(self, path: Path) -> RuleDocument:
        """Read ``path`` (relative paths resolve against the root) as UTF-8."""
        if not path.is_absolute():
            path = self._root / path
        text = path.read_text(encoding="utf-8")
        return load_document(path.name, text, source_path=path)
