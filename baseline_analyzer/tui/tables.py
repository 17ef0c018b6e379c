from typing import Any

from rich.table import Column, Table
from rich.text import Text

from baseline_analyzer.analysis.lint import PatternCheck
from baseline_analyzer.tui.enums import ReportStyle, duplicate_kind_style


class ReportTable:
    @staticmethod
    def summary_block(payload: dict[str, Any]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Files", str(payload["files_count"]))
        table.add_row("Patterns", str(payload["total_patterns"]))
        table.add_row("Unique", str(payload["unique_patterns"]))
        table.add_row(
            "Duplicates",
            f"{payload['duplicate_patterns']} ({payload['duplicate_percentage']}%)",
        )
        return table

    @staticmethod
    def histogram_table(header: str, counts: dict[str, int]) -> Table:
        table = Table(
            Column(header=header, width=16),
            Column(header="Patterns", width=10, justify="right"),
            expand=True,
            header_style="bold",
        )
        for key, value in counts.items():
            table.add_row(key, str(value))
        return table

    @staticmethod
    def duplicates_table(groups: list[dict[str, Any]]) -> Table:
        table = Table(
            Column(header="Count", width=6, justify="right"),
            Column(header="Kind", width=26),
            Column(header="Pattern", overflow="fold"),
            Column(header="Files", overflow="ellipsis", max_width=42),
            expand=True,
            header_style="bold",
        )
        for group in groups:
            style = duplicate_kind_style(group["kind"]).value
            table.add_row(
                str(group["count"]),
                Text(group["kind"], style=style),
                Text(group["pattern"]),
                Text(", ".join(dict.fromkeys(group["documents"]))),
            )
        return table


class OptimizationTable:
    @staticmethod
    def optimizations_table(items: list[dict[str, Any]]) -> Table:
        table = Table(
            Column(header="Kind", width=12),
            Column(header="Score", width=6, justify="right"),
            Column(header="Pattern", overflow="fold"),
            Column(header="Suggestion", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for item in items:
            table.add_row(
                item["kind"],
                str(item["complexity"]),
                Text(item["pattern"]),
                Text(item["suggestion"]),
            )
        return table


class PatternCheckTable:
    @staticmethod
    def findings_table(check: PatternCheck) -> Table:
        table = Table(
            Column(header="Level", width=8),
            Column(header="Finding", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for error in check.errors:
            table.add_row(Text("error", style=ReportStyle.ERROR.value), Text(error))
        for warning in check.warnings:
            table.add_row(Text("warning", style=ReportStyle.WARNING.value), Text(warning))
        return table
