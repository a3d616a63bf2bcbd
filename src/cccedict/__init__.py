"""CC-CEDICT / CC-Canto dictionary line parser package."""

from .dictionary import Cedict, parse_cedict_lines, scan_cedict_lines, summarize
from .errors import CedictEntryError
from .grammar.definitions import split_definitions
from .grammar.line import classify_line, parse_entry, parse_line
from .grammar.syllables import parse_pronunciation_block, parse_syllables
from .models import CedictEntry, LineResult, ParseSummary, Syllable

__all__ = [
    "Cedict",
    "CedictEntry",
    "CedictEntryError",
    "LineResult",
    "ParseSummary",
    "Syllable",
    "classify_line",
    "parse_cedict_lines",
    "parse_entry",
    "parse_line",
    "parse_pronunciation_block",
    "parse_syllables",
    "scan_cedict_lines",
    "split_definitions",
    "summarize",
]
