from typing import Final


DOCUMENT_SUFFIXES: Final[tuple[str, ...]] = (".neon", ".yaml", ".yml")

PARAMETERS_KEY: Final[str] = "parameters"
IGNORE_ERRORS_KEY: Final[str] = "ignoreErrors"

# (keywords, category) checked in order; first substring hit wins.
CATEGORY_KEYWORDS: Final[tuple[tuple[tuple[str, ...], str], ...]] = (
    (("Eloquent", "Builder"), "eloquent"),
    (("Filament",), "filament"),
    (("Livewire",), "livewire"),
    (("Request", "Http"), "http"),
    (("Collection",), "collection"),
    (("Facade",), "facade"),
)

COMPLEXITY_METACHARACTERS: Final[tuple[str, ...]] = ("+", "*", "?", "[", "(", "|", "\\")

SIMPLE_MAX: Final[int] = 5
MODERATE_MAX: Final[int] = 15
COMPLEX_MAX: Final[int] = 30

DEFAULT_TOP_N: Final[int] = 10
DEFAULT_SIMILARITY_THRESHOLD: Final[float] = 80.0
REGEX_PROBE_STRING: Final[str] = "test string"

OPTIMIZE_COMPLEXITY_THRESHOLD: Final[int] = 20
VAGUE_WILDCARD_LIMIT: Final[int] = 2
COMMON_PATTERN_MIN_DOCUMENTS: Final[int] = 3
ORGANIZATION_DOCUMENT_LIMIT: Final[int] = 10
RECOMMENDATION_EXAMPLES: Final[int] = 5

COMMON_BASELINE_FILENAME: Final[str] = "common-patterns.neon"
