"""Whole-dictionary loading on top of the single-line grammar.

Loading is best-effort: blank lines, comments and malformed lines are left out
of the resulting collection, and entries keep input line order.
"""

from __future__ import annotations

from dataclasses import dataclass
import io
import logging
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from cccedict.errors import CedictEntryError
from cccedict.grammar.line import (
    LINE_KIND_BLANK,
    LINE_KIND_COMMENT,
    LINE_KIND_ENTRY,
    classify_line,
    parse_entry,
)
from cccedict.models import CedictEntry, LineResult, ParseSummary

LINE_KIND_INVALID = "invalid"

logger = logging.getLogger(__name__)


def scan_cedict_lines(lines: Iterable[str]) -> list[LineResult]:
    """Parse every line and record its outcome.

    Args:
        lines: Raw dictionary lines, with or without line terminators.

    Returns:
        One result per input line, numbered from 1.
    """

    results: list[LineResult] = []
    for line_number, line in enumerate(lines, start=1):
        kind = classify_line(line)
        if kind != LINE_KIND_ENTRY:
            results.append(LineResult(line_number=line_number, kind=kind))
            continue
        try:
            entry = parse_entry(line)
        except CedictEntryError:
            logger.debug(f"Skipping malformed line {line_number}: {line.rstrip()!r}")
            results.append(LineResult(line_number=line_number, kind=LINE_KIND_INVALID))
            continue
        results.append(LineResult(line_number=line_number, kind=LINE_KIND_ENTRY, entry=entry))
    return results


def parse_cedict_lines(lines: Iterable[str]) -> list[CedictEntry]:
    """Parse dictionary lines into entries, dropping everything else.

    Args:
        lines: Iterator of raw dictionary lines.

    Returns:
        Entries in input order.
    """

    return [result.entry for result in scan_cedict_lines(lines) if result.entry is not None]


def summarize(results: Iterable[LineResult]) -> ParseSummary:
    """Count scan results by kind.

    Args:
        results: Output of :func:`scan_cedict_lines`.

    Returns:
        Summary with per-kind counts and the invalid line numbers.
    """

    entries = comments = blanks = 0
    invalid: list[int] = []
    for result in results:
        if result.kind == LINE_KIND_ENTRY:
            entries += 1
        elif result.kind == LINE_KIND_COMMENT:
            comments += 1
        elif result.kind == LINE_KIND_BLANK:
            blanks += 1
        else:
            invalid.append(result.line_number)
    return ParseSummary(
        entries=entries,
        comments=comments,
        blanks=blanks,
        invalid_lines=tuple(invalid),
    )


@dataclass(frozen=True)
class Cedict:
    """Ordered, read-only collection of parsed dictionary entries.

    Instances are usually built with :meth:`from_str`, :meth:`from_file` or
    :meth:`from_path`. Lines that do not parse are omitted rather than
    reported; use :func:`scan_cedict_lines` when diagnostics are needed.
    """

    entries: tuple[CedictEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CedictEntry]:
        return iter(self.entries)

    @classmethod
    def from_str(cls, text: str) -> Cedict:
        """Build a dictionary from in-memory text."""

        return cls.from_file(io.StringIO(text))

    @classmethod
    def from_file(cls, handle: TextIO) -> Cedict:
        """Build a dictionary from an open text stream.

        The stream is read line by line and is not closed.
        """

        return cls(entries=tuple(parse_cedict_lines(handle)))

    @classmethod
    def from_path(cls, path: Path | str) -> Cedict:
        """Load and parse a UTF-8 dictionary file.

        Args:
            path: Location of a CC-CEDICT or CC-Canto ``.u8``/``.txt`` file.

        Returns:
            Parsed dictionary.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"CC-CEDICT file not found: {path}")

        logger.info(f"Loading dictionary entries from {path}")
        with path.open("r", encoding="utf-8") as handle:
            cedict = cls.from_file(handle)
        logger.info(f"Loaded {len(cedict):,} entries from {path}")
        return cedict
