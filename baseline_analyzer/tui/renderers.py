from typing import Any

from rich.console import Console
from rich.markup import escape

from baseline_analyzer.analysis.lint import PatternCheck
from baseline_analyzer.constants import COMMON_BASELINE_FILENAME
from baseline_analyzer.tui.enums import ReportStyle
from baseline_analyzer.tui.sections import ReportSection
from baseline_analyzer.tui.tables import OptimizationTable, PatternCheckTable, ReportTable


class ReportConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_problems(self, payload: dict[str, Any]) -> None:
        if payload.get("errors"):
            self.console.print(
                ReportSection.problems("errors", payload["errors"], ReportStyle.ERROR)
            )
        if payload.get("warnings"):
            self.console.print(
                ReportSection.problems("warnings", payload["warnings"], ReportStyle.WARNING)
            )

    def render_report(self, payload: dict[str, Any]) -> None:
        self.console.print(
            ReportSection.table("baseline overview", ReportTable.summary_block(payload))
        )
        if payload["categories"]:
            self.console.print(
                ReportSection.table(
                    "categories",
                    ReportTable.histogram_table("Category", payload["categories"]),
                    style=ReportStyle.BREAKDOWN,
                )
            )
        self.console.print(
            ReportSection.table(
                "complexity",
                ReportTable.histogram_table("Bucket", payload["complexity"]),
                style=ReportStyle.BREAKDOWN,
            )
        )

        if payload["most_duplicated"]:
            self.console.print(
                ReportSection.table(
                    "most duplicated",
                    ReportTable.duplicates_table(payload["most_duplicated"]),
                    style=ReportStyle.DUPLICATES,
                )
            )
        else:
            self.console.print(
                ReportSection.message(
                    "duplicates", "No duplicate patterns found.", ReportStyle.MUTED
                )
            )

        self.render_problems(payload)

        for item in payload.get("recommendations", []):
            self.console.print(ReportSection.recommendation(item))

    def render_optimizations(
        self,
        items: list[dict[str, Any]],
        common: list[str],
        snippet: str,
        filename: str = COMMON_BASELINE_FILENAME,
    ) -> None:
        if items:
            self.console.print(
                ReportSection.table(
                    "optimization opportunities",
                    OptimizationTable.optimizations_table(items),
                    style=ReportStyle.BREAKDOWN,
                )
            )
        else:
            self.console.print(
                ReportSection.message(
                    "optimizations",
                    "No optimization opportunities found.",
                    ReportStyle.PASSED,
                )
            )

        if common:
            self.console.print(
                ReportSection.message(
                    f"common baseline: {filename}",
                    escape(snippet.rstrip()),
                    ReportStyle.DUPLICATES,
                )
            )

    def render_pattern_check(self, check: PatternCheck) -> None:
        if not check.errors and not check.warnings:
            self.console.print(
                ReportSection.message(
                    "pattern",
                    f"{escape(check.pattern)}\nPattern is valid and well-formed.",
                    ReportStyle.PASSED,
                )
            )
            return
        self.console.print(
            ReportSection.table(
                "pattern",
                PatternCheckTable.findings_table(check),
                style=ReportStyle.ERROR if check.errors else ReportStyle.WARNING,
                subtitle=escape(check.pattern),
            )
        )

    def render_validation_result(self, files: int, patterns: int, failed: int) -> None:
        self.console.print(
            ReportSection.verdict(
                "validate",
                {"files": files, "patterns": patterns, "failed": failed},
                failed=bool(failed),
            )
        )
