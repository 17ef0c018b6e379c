import logging
from pathlib import Path
from typing import Any, Dict

import click
from rich.console import Console
from rich.logging import RichHandler

from baseline_analyzer.analysis.lint import lint_pattern
from baseline_analyzer.analysis.optimizer import (
    common_baseline_yaml,
    consolidation_plan,
    find_optimizations,
)
from baseline_analyzer.analysis.pipeline import BaselineAnalyzer
from baseline_analyzer.constants import (
    COMMON_BASELINE_FILENAME,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_TOP_N,
)
from baseline_analyzer.errors import BaselineDirectoryError
from baseline_analyzer.models import AnalysisOptions, OutputFormat
from baseline_analyzer.rendering import render_json, render_markdown
from baseline_analyzer.tui import ReportConsoleUI


FORMAT_VALUES = [item.value for item in OutputFormat]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _directory_argument():
    return click.argument(
        "directory",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
    )


def _format_option(*choices: OutputFormat):
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([item.value for item in choices], case_sensitive=False),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )


def _load_directory(directory: Path, options: AnalysisOptions) -> BaselineAnalyzer:
    analyzer = BaselineAnalyzer(options)
    try:
        analyzer.add_directory(directory)
    except BaselineDirectoryError as exc:
        raise click.BadParameter(str(exc), param_hint="'DIRECTORY'") from exc
    return analyzer


def _emit(payload: Dict[str, Any], output_format: str, ui: ReportConsoleUI) -> None:
    normalized = OutputFormat(output_format.lower())
    if normalized == OutputFormat.JSON:
        click.echo(render_json(payload), nl=False)
    elif normalized == OutputFormat.MARKDOWN:
        click.echo(render_markdown(payload))
    else:
        ui.render_report(payload)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline progress to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Analyze PHPStan baseline rule documents."""
    ctx.obj = {"verbose": verbose}
    _configure_logging(verbose)


@cli.command(help="Report duplicates, categories and complexity for a baselines directory.")
@_directory_argument()
@click.option(
    "--top-n",
    "top_n",
    type=click.IntRange(min=0),
    default=DEFAULT_TOP_N,
    show_default=True,
    help="Number of most duplicated patterns to list.",
)
@_format_option(OutputFormat.TEXT, OutputFormat.JSON, OutputFormat.MARKDOWN)
@click.option(
    "--similarity/--no-similarity",
    default=False,
    show_default=True,
    help="Also flag near-duplicate patterns across files (advisory).",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0, 100),
    default=DEFAULT_SIMILARITY_THRESHOLD,
    show_default=True,
    help="Similarity percentage above which pattern pairs are flagged.",
)
@click.pass_obj
def analyze(
    obj: Dict[str, Any],
    directory: Path,
    top_n: int,
    output_format: str,
    similarity: bool,
    threshold: float,
) -> None:
    options = AnalysisOptions(
        top_n=top_n,
        similarity_threshold=threshold,
        include_similarity=similarity,
    )
    report = _load_directory(directory, options).build()
    _emit(report.as_dict(), output_format, ReportConsoleUI(Console()))

    if not report.is_valid():
        raise click.exceptions.Exit(1)


@cli.command(help="Suggest pattern optimizations and a shared common baseline.")
@_directory_argument()
@_format_option(OutputFormat.TEXT, OutputFormat.JSON)
@click.pass_obj
def optimize(obj: Dict[str, Any], directory: Path, output_format: str) -> None:
    analyzer = _load_directory(directory, AnalysisOptions(top_n=None))
    report = analyzer.build()

    optimizations = [item.as_dict() for item in find_optimizations(analyzer.rules)]
    plan = consolidation_plan(analyzer.rules)
    snippet = common_baseline_yaml(plan.common)

    if OutputFormat(output_format.lower()) == OutputFormat.JSON:
        payload = {
            "optimizations": optimizations,
            "consolidation": plan.as_dict(),
            "common_file": {"name": COMMON_BASELINE_FILENAME, "content": snippet},
            "errors": report.errors_by_document(),
        }
        click.echo(render_json(payload), nl=False)
    else:
        ui = ReportConsoleUI(Console())
        ui.render_optimizations(
            optimizations, list(plan.common), snippet, filename=COMMON_BASELINE_FILENAME
        )
        ui.render_problems({"errors": report.errors_by_document()})

    if not report.is_valid():
        raise click.exceptions.Exit(1)


@cli.command(help="Check a single pattern for correctness and common issues.")
@click.argument("pattern")
@click.pass_obj
def check(obj: Dict[str, Any], pattern: str) -> None:
    result = lint_pattern(pattern)
    ReportConsoleUI(Console()).render_pattern_check(result)
    if not result.is_valid:
        raise click.exceptions.Exit(1)


@cli.command(help="Validate syntax, structure and patterns of baseline files.")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_obj
def validate(obj: Dict[str, Any], files: tuple[Path, ...]) -> None:
    ui = ReportConsoleUI(Console())
    analyzer = BaselineAnalyzer()
    for path in files:
        analyzer.add_file(path)
    report = analyzer.build()

    ui.render_problems(report.as_dict())

    seen: set[str] = set()
    failing = 0
    for rule in analyzer.rules:
        if rule.pattern in seen:
            continue
        seen.add(rule.pattern)
        result = lint_pattern(rule.pattern)
        if not result.is_valid:
            failing += 1
            ui.render_pattern_check(result)

    failed = len(report.errors) + failing
    ui.render_validation_result(
        files=len(files), patterns=report.total_patterns, failed=failed
    )
    if failed:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        # Without standalone mode click returns an Exit's code instead of raising it.
        result = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
