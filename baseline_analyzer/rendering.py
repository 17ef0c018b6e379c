"""Serialize report payloads (``AnalysisReport.as_dict()``) to JSON and Markdown."""

import json
from typing import Any

_MAX_MARKDOWN_EXAMPLES = 3


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def _title(value: str) -> str:
    return value.replace("_", " ").capitalize()


def _problems_section(heading: str, grouped: dict[str, list[str]]) -> list[str]:
    lines = [f"## {heading}", ""]
    if not grouped:
        lines.extend([f"No {heading.lower()} found.", ""])
        return lines
    for document, messages in grouped.items():
        lines.append(f"### {document}")
        lines.extend(f"- {message}" for message in messages)
        lines.append("")
    return lines


def render_markdown(payload: dict[str, Any]) -> str:
    lines: list[str] = ["# PHPStan Baseline Pattern Analysis Report", ""]

    lines.extend(["## Statistics", ""])
    lines.append(f"- **Total Files**: {payload['files_count']}")
    lines.append(f"- **Total Patterns**: {payload['total_patterns']}")
    lines.append(f"- **Unique Patterns**: {payload['unique_patterns']}")
    lines.append(
        f"- **Duplicate Patterns**: {payload['duplicate_patterns']} "
        f"({payload['duplicate_percentage']}%)"
    )
    lines.append("")

    lines.extend(["### Pattern Categories", ""])
    for category, count in payload["categories"].items():
        lines.append(f"- **{_title(category)}**: {count} patterns")
    lines.append("")

    lines.extend(["### Complexity Distribution", ""])
    for bucket, count in payload["complexity"].items():
        lines.append(f"- **{_title(bucket)}**: {count} patterns")
    lines.append("")

    lines.extend(["## Most Duplicated Patterns", ""])
    if payload["most_duplicated"]:
        for group in payload["most_duplicated"]:
            documents = ", ".join(dict.fromkeys(group["documents"]))
            lines.append(f"### Pattern: `{group['pattern']}`")
            lines.append(f"- **Kind**: {group['kind']}")
            lines.append(f"- **Files**: {documents}")
            lines.append(f"- **Count**: {group['count']}")
            lines.append("")
    else:
        lines.extend(["No duplicate patterns found.", ""])

    lines.extend(_problems_section("Errors", payload.get("errors", {})))
    lines.extend(_problems_section("Warnings", payload.get("warnings", {})))

    lines.extend(["## Recommendations", ""])
    recommendations = payload.get("recommendations", [])
    if not recommendations:
        lines.extend(["No specific recommendations at this time.", ""])
    for item in recommendations:
        lines.append(f"### [{item['priority'].upper()}] {item['title']}")
        lines.append("")
        lines.append(item["description"])
        lines.append("")
        lines.append(f"**Action**: {item['action']}")
        lines.append("")
        if item.get("patterns"):
            lines.append("**Example patterns**:")
            lines.extend(f"- `{pattern}`" for pattern in item["patterns"][:_MAX_MARKDOWN_EXAMPLES])
            lines.append("")

    return "\n".join(lines)
