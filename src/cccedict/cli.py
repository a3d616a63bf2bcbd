"""CLI entrypoint for parsing a dictionary file into TSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from cccedict.dictionary import scan_cedict_lines, summarize
from cccedict.io.tsv_io import write_tsv
from cccedict.models import ParseSummary
from cccedict.reporting.report_md import build_report_md


def _format_integer_ranges(values: Sequence[int]) -> str:
    """Format sorted integers as compact ranges like ``3-5, 8, 10-12``.

    Args:
        values: Sorted integer list.

    Returns:
        Compact range string.
    """

    if not values:
        return ""

    ranges: list[str] = []
    start = values[0]
    prev = values[0]

    for value in values[1:]:
        if value == prev + 1:
            prev = value
            continue
        ranges.append(f"{start}-{prev}" if start != prev else str(start))
        start = value
        prev = value

    ranges.append(f"{start}-{prev}" if start != prev else str(start))
    return ", ".join(ranges)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the parse command.
    """

    parser = argparse.ArgumentParser(
        description="Parse a CC-CEDICT or CC-Canto dictionary file into TSV."
    )
    parser.add_argument("dictionary", type=Path, help="Path to the dictionary file.")
    parser.add_argument("--output", required=True, type=Path, help="Destination TSV output path.")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to TSV).",
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument(
        "--verbose", action="store_true", help="Log each skipped line while parsing."
    )
    return parser


def _print_summary(summary: ParseSummary) -> None:
    """Print line counts and any skipped line numbers."""

    if summary.invalid_lines:
        print(
            "WARNING: Skipped malformed lines "
            f"({len(summary.invalid_lines)}): {_format_integer_ranges(summary.invalid_lines)}"
        )

    rows = [
        ["entry", str(summary.entries)],
        ["comment", str(summary.comments)],
        ["blank", str(summary.blanks)],
        ["invalid", str(len(summary.invalid_lines))],
    ]
    print("\nLines by kind:")
    print(_format_table(["kind", "count"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Argument list; ``None`` reads ``sys.argv``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.dictionary.exists():
        raise SystemExit(f"Dictionary not found: {args.dictionary}")

    report_path = args.report if args.report is not None else args.output.parent / "report.md"

    with args.dictionary.open("r", encoding="utf-8") as handle:
        results = scan_cedict_lines(handle)
    summary = summarize(results)

    entries = [result.entry for result in results if result.entry is not None]
    written = write_tsv(entries, output_path=args.output, include_header=not args.no_header)
    report_path.write_text(build_report_md(args.dictionary, summary), encoding="utf-8")

    print(f"Wrote {written} entries to {args.output}")
    print(f"Wrote report to {report_path}")
    _print_summary(summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
