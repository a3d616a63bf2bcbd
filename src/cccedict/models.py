"""Data models shared by the line grammar and the dictionary loaders.

Entries are immutable records produced fresh for every parsed line. Sequence
fields use tuples so entries stay hashable and safe to share between callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Syllable:
    """One ``(pronunciation, tone)`` pair from a pinyin or jyutping block.

    Both jyutping and pinyin mark tones with numbers, but no arithmetic is ever
    done on them, so ``tone`` stays a string. It may be empty for neutral or
    unannotated syllables.
    """

    pronunciation: str
    tone: str = ""

    @property
    def numbered(self) -> str:
        """Return the syllable in numbered form, for example ``ni3``."""

        return f"{self.pronunciation}{self.tone}"


@dataclass(frozen=True)
class CedictEntry:
    """One CC-CEDICT (or CC-Canto) dictionary line in structured form.

    ``pinyin`` and ``jyutping`` are ``None`` when their block is empty or, for
    jyutping, absent. ``definitions`` is ``None`` when the slash-delimited
    block yields no definitions.
    """

    traditional: str
    simplified: str
    pinyin: tuple[Syllable, ...] | None = None
    jyutping: tuple[Syllable, ...] | None = None
    definitions: tuple[str, ...] | None = None

    @classmethod
    def from_line(cls, line: str) -> CedictEntry:
        """Parse exactly one entry from ``line``.

        Args:
            line: One dictionary line.

        Returns:
            The parsed entry.

        Raises:
            CedictEntryError: If the line is malformed, blank or a comment.
        """

        from cccedict.errors import CedictEntryError
        from cccedict.grammar.line import parse_line

        entry = parse_line(line)
        if entry is None:
            raise CedictEntryError(line)
        return entry


@dataclass(frozen=True)
class LineResult:
    """Outcome of scanning one input line during a whole-dictionary load."""

    line_number: int
    kind: str
    entry: CedictEntry | None = None


@dataclass(frozen=True)
class ParseSummary:
    """Aggregate line counts for one dictionary load.

    ``invalid_lines`` keeps 1-based line numbers in input order so reports can
    point back at the source file.
    """

    entries: int = 0
    comments: int = 0
    blanks: int = 0
    invalid_lines: tuple[int, ...] = field(default_factory=tuple)

    @property
    def total_lines(self) -> int:
        """Return the number of lines seen, whatever their kind."""

        return self.entries + self.comments + self.blanks + len(self.invalid_lines)
