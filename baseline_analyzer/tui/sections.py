from typing import Any, Optional

from rich.console import RenderableType
from rich.markup import escape
from rich.panel import Panel

from baseline_analyzer.tui.enums import ReportStyle, priority_style


def _panel(
    body: RenderableType, title: str, style: ReportStyle, subtitle: Optional[str] = None
) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style.value, padding=(0, 1))


class ReportSection:
    @staticmethod
    def table(
        title: str,
        body: RenderableType,
        style: ReportStyle = ReportStyle.OVERVIEW,
        subtitle: Optional[str] = None,
    ) -> Panel:
        return _panel(body, title, style, subtitle)

    @staticmethod
    def message(title: str, body: str, style: ReportStyle) -> Panel:
        """``body`` is rich markup; callers escape user text."""
        return _panel(body, title, style)

    @staticmethod
    def problems(title: str, grouped: dict[str, list[str]], style: ReportStyle) -> Panel:
        lines: list[str] = []
        for document, messages in grouped.items():
            lines.append(f"[bold]{escape(document)}[/bold]")
            lines.extend(f"- {escape(message)}" for message in messages)
        return _panel("\n".join(lines), title, style)

    @staticmethod
    def recommendation(item: dict[str, Any]) -> Panel:
        body = escape(item["description"])
        body += f"\n[bold]Action[/bold]: {escape(item['action'])}"
        for pattern in item.get("patterns", []):
            body += f"\n- {escape(pattern)}"
        return _panel(
            body, f"{item['priority']}: {item['title']}", priority_style(item["priority"])
        )

    @staticmethod
    def verdict(title: str, counts: dict[str, int], failed: bool) -> Panel:
        body = "\n".join(f"[bold]{name}[/bold] {value}" for name, value in counts.items())
        return _panel(body, title, ReportStyle.ERROR if failed else ReportStyle.PASSED)
