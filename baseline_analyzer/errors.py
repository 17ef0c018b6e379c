from pathlib import Path


class BaselineAnalyzerError(Exception):
    """Base user-facing application error."""


class BaselineDirectoryError(BaselineAnalyzerError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Baseline directory not found: {path}")


class BaselineDocumentError(BaselineAnalyzerError):
    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"{message}: {source}")


class BaselineReadError(BaselineDocumentError):
    def __init__(self, source: str, detail: str) -> None:
        self.detail = detail
        super().__init__(source=source, message=f"Cannot read baseline ({detail})")


class BaselineSyntaxError(BaselineDocumentError):
    def __init__(self, source: str, detail: str) -> None:
        self.detail = detail
        super().__init__(source=source, message=f"Invalid NEON/YAML syntax ({detail})")


class BaselineStructureError(BaselineDocumentError):
    def __init__(self, source: str, detail: str) -> None:
        self.detail = detail
        super().__init__(source=source, message=f"Invalid baseline structure ({detail})")


class RuleValidationError(BaselineDocumentError):
    def __init__(self, source: str, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(source=source, message=f"Index {index}: {detail}")


class BaselineAnalyzerWarning(BaselineDocumentError):
    """Advisory finding; recorded on the report, never raised by the pipeline."""


class RegexEvaluationWarning(BaselineAnalyzerWarning):
    def __init__(self, source: str, index: int, pattern: str, detail: str) -> None:
        self.index = index
        self.pattern = pattern
        self.detail = detail
        super().__init__(
            source=source,
            message=f"Index {index}: regex evaluation failed ({detail}) for {pattern}",
        )


class SimilarityWarning(BaselineAnalyzerWarning):
    def __init__(
        self,
        source: str,
        other_source: str,
        pattern: str,
        other_pattern: str,
        similarity: float,
    ) -> None:
        self.other_source = other_source
        self.pattern = pattern
        self.other_pattern = other_pattern
        self.similarity = similarity
        super().__init__(
            source=source,
            message=(
                f"Similar patterns ({similarity:.1f}% match): "
                f"{pattern} | {other_pattern} ({other_source})"
            ),
        )
