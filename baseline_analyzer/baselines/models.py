"""Baseline document models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RuleDocument:
    name: str
    entries: tuple[Any, ...]
    source_path: Path | None = None

    def __len__(self) -> int:
        return len(self.entries)
