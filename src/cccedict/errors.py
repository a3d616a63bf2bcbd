"""Exceptions raised by the line grammar."""

from __future__ import annotations


class CedictEntryError(ValueError):
    """Raised when a line does not match the dictionary entry grammar.

    The grammar does not report which rule failed; the offending line is kept
    on the exception for callers that want to log it.
    """

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid cedict entry input: {line!r}")
        self.line = line
