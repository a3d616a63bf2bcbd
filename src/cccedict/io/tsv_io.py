"""TSV export for parsed dictionary entries."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from cccedict.models import CedictEntry
from cccedict.pinyin import render_numbered, render_tone_marks

TSV_HEADER = [
    "traditional",
    "simplified",
    "pinyin",
    "pinyin_marked",
    "jyutping",
    "definitions",
]


def entry_to_row(entry: CedictEntry) -> list[str]:
    """Flatten one entry into TSV cells using the canonical column order.

    Missing blocks become empty cells. Definitions are joined with ``/`` so the
    original gloss boundaries stay visible.
    """

    return [
        entry.traditional,
        entry.simplified,
        render_numbered(entry.pinyin),
        render_tone_marks(entry.pinyin),
        render_numbered(entry.jyutping),
        "/".join(entry.definitions or ()),
    ]


def write_tsv(
    entries: Iterable[CedictEntry], output_path: Path, include_header: bool = True
) -> int:
    """Write entries to a TSV file.

    Args:
        entries: Parsed entries to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.

    Returns:
        Number of entry rows written.
    """

    count = 0
    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for entry in entries:
            handle.write("\t".join(entry_to_row(entry)))
            handle.write("\n")
            count += 1
    return count
