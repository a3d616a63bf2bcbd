"""Markdown report generation for dictionary parse runs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from cccedict.models import ParseSummary


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(source: Path, summary: ParseSummary) -> str:
    """Build the markdown report for one dictionary parse.

    Args:
        source: Dictionary file that was parsed.
        summary: Line counts collected while parsing.

    Returns:
        Full markdown content with summary tables.
    """

    kind_rows = [
        ("entry", str(summary.entries)),
        ("comment", str(summary.comments)),
        ("blank", str(summary.blanks)),
        ("invalid", str(len(summary.invalid_lines))),
        ("total", str(summary.total_lines)),
    ]
    invalid_rows = [(str(line_number),) for line_number in summary.invalid_lines]

    sections = [
        "# Dictionary Parse Report",
        "",
        f"Source: `{source}`",
        "",
        "## Lines by kind",
        _markdown_table(["kind", "count"], kind_rows),
        "",
        "## Skipped malformed lines",
        _markdown_table(["line_number"], invalid_rows),
    ]

    return "\n".join(sections) + "\n"
