"""Load, normalize and classify many documents, then build one report."""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from baseline_analyzer.analysis.classifier import classify
from baseline_analyzer.analysis.detector import find_duplicates, find_similar_patterns
from baseline_analyzer.analysis.normalizer import normalize_document
from baseline_analyzer.analysis.regex import probe_patterns
from baseline_analyzer.analysis.report import build_report
from baseline_analyzer.baselines.models import RuleDocument
from baseline_analyzer.baselines.parser import load_document, load_document_file
from baseline_analyzer.baselines.repository import BaselineRepository
from baseline_analyzer.errors import (
    BaselineAnalyzerWarning,
    BaselineDocumentError,
    BaselineReadError,
    BaselineStructureError,
    BaselineSyntaxError,
)
from baseline_analyzer.models import AnalysisOptions, AnalysisReport, NormalizedRule

logger = logging.getLogger(__name__)


class BaselineAnalyzer:
    """Loader -> Normalizer -> Classifier per document, then one merged report."""

    def __init__(self, options: Optional[AnalysisOptions] = None) -> None:
        self.options = options or AnalysisOptions()

        self.documents: list[RuleDocument] = []
        self.rules: list[NormalizedRule] = []
        self.errors: list[BaselineDocumentError] = []

    def add_document(self, document: RuleDocument) -> None:
        rules, errors = normalize_document(document)
        for error in errors:
            logger.warning("%s", error)
        self.documents.append(document)
        self.rules.extend(classify(rule) for rule in rules)
        self.errors.extend(errors)

    def _record(self, error: BaselineDocumentError) -> None:
        logger.warning("%s", error)
        self.errors.append(error)

    def add_text(self, source: str, text: str, source_path: Optional[Path] = None) -> None:
        try:
            document = load_document(source, text, source_path=source_path)
        except (BaselineSyntaxError, BaselineStructureError) as exc:
            self._record(exc)
            return
        self.add_document(document)

    def add_file(self, path: Path) -> None:
        self._read(path, load_document_file)

    def _read(self, path: Path, reader: Callable[[Path], RuleDocument]) -> None:
        try:
            document = reader(path)
        except (OSError, UnicodeDecodeError) as exc:
            self._record(BaselineReadError(path.name, str(exc)))
            return
        except (BaselineSyntaxError, BaselineStructureError) as exc:
            self._record(exc)
            return
        self.add_document(document)

    def add_directory(self, root: Path) -> None:
        repository = BaselineRepository(root)
        sources = repository.list_sources()
        logger.info("Found %d baseline documents in %s", len(sources), root)
        for path in sources:
            self._read(path, repository.read_document)

    def collect_warnings(self) -> list[BaselineAnalyzerWarning]:
        warnings: list[BaselineAnalyzerWarning] = []
        warnings.extend(probe_patterns(self.rules, self.options.probe_string))
        if self.options.include_similarity:
            warnings.extend(
                find_similar_patterns(self.rules, self.options.similarity_threshold)
            )
        return warnings

    def build(self) -> AnalysisReport:
        groups = find_duplicates(self.rules)
        return build_report(
            files_count=len(self.documents),
            rules=self.rules,
            groups=groups,
            top_n=self.options.top_n,
            errors=self.errors,
            warnings=self.collect_warnings(),
        )


def analyze_sources(
    sources: Iterable[tuple[str, str]], options: Optional[AnalysisOptions] = None
) -> AnalysisReport:
    analyzer = BaselineAnalyzer(options)
    for source, text in sources:
        analyzer.add_text(source, text)
    return analyzer.build()


def analyze_directory(root: Path, options: Optional[AnalysisOptions] = None) -> AnalysisReport:
    analyzer = BaselineAnalyzer(options)
    analyzer.add_directory(root)
    return analyzer.build()
