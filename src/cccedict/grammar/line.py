"""Line classifier, field segmenter and entry assembler.

A dictionary line has the shape::

    TRAD SIMP [PINYIN] {JYUTPING} /def1/def2/.../ # comment

The jyutping block and the trailing comment are optional. Fields are separated
by runs of spaces or tabs. Each line is parsed on its own; nothing carries over
between lines.
"""

from __future__ import annotations

import re

from cccedict.errors import CedictEntryError
from cccedict.grammar.definitions import split_definitions
from cccedict.grammar.syllables import parse_pronunciation_block
from cccedict.models import CedictEntry

LINE_KIND_BLANK = "blank"
LINE_KIND_COMMENT = "comment"
LINE_KIND_ENTRY = "entry"

COMMENT_RE = re.compile(r"[ \t]*#")
ENTRY_HEAD_RE = re.compile(
    r"(?P<traditional>[^ \t]+)[ \t]+"
    r"(?P<simplified>[^ \t]+)[ \t]+"
    r"\[(?P<pinyin>[^\]]*)\][ \t]+"
    r"(?:\{(?P<jyutping>[^}]*)\})?[ \t]*"
)
TRAILER_RE = re.compile(r"[ \t]*(?:#.*)?")


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def classify_line(line: str) -> str:
    """Classify a line as ``blank``, ``comment`` or ``entry``.

    ``entry`` only means the line is a candidate; it may still fail to parse.
    """

    line = _strip_line_ending(line)
    if not line.strip(" \t"):
        return LINE_KIND_BLANK
    if COMMENT_RE.match(line):
        return LINE_KIND_COMMENT
    return LINE_KIND_ENTRY


def parse_entry(line: str) -> CedictEntry:
    """Segment a candidate line and assemble the entry.

    Blank and comment lines are not skipped here; callers classify the line
    with :func:`classify_line` first.

    Raises:
        CedictEntryError: If any field or separator is missing, or if text
            other than whitespace and a comment follows the definitions.
    """

    line = _strip_line_ending(line)
    head = ENTRY_HEAD_RE.match(line)
    if head is None:
        raise CedictEntryError(line)

    try:
        definitions, remainder = split_definitions(line[head.end() :])
    except CedictEntryError as exc:
        raise CedictEntryError(line) from exc

    if not TRAILER_RE.fullmatch(remainder):
        raise CedictEntryError(line)

    jyutping = head.group("jyutping")
    return CedictEntry(
        traditional=head.group("traditional"),
        simplified=head.group("simplified"),
        pinyin=parse_pronunciation_block(head.group("pinyin")),
        jyutping=parse_pronunciation_block(jyutping) if jyutping is not None else None,
        definitions=definitions,
    )


def parse_line(line: str) -> CedictEntry | None:
    """Parse one dictionary line.

    Args:
        line: One line of text; a trailing ``\\n`` or ``\\r\\n`` is ignored.

    Returns:
        The parsed entry, or ``None`` for blank and comment-only lines.

    Raises:
        CedictEntryError: If the line is neither blank, a comment, nor a
            complete entry.
    """

    if classify_line(line) != LINE_KIND_ENTRY:
        return None
    return parse_entry(line)
