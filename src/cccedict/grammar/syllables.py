"""Tokenizer for the interior of ``[pinyin]`` and ``{jyutping}`` blocks."""

from __future__ import annotations

import re

from cccedict.models import Syllable

# Letters then an optional tone number. The digit run ends where the next
# syllable's letters start, so ``ni3hao3`` needs no separator.
SYLLABLE_RE = re.compile(r"[ \t]*([A-Za-z]+)([0-9]*)")


def parse_syllables(text: str) -> tuple[Syllable, ...]:
    """Split a pronunciation string into syllables.

    Spacing between syllables is optional and may be irregular. Tokenizing
    stops at the first position where no letter run follows; anything left
    over (punctuation such as ``·`` or ``,``) is ignored rather than failing
    the line.

    Args:
        text: Raw text between the block delimiters.

    Returns:
        Syllables in source order, possibly empty.
    """

    syllables: list[Syllable] = []
    pos = 0
    while pos < len(text):
        match = SYLLABLE_RE.match(text, pos)
        if match is None:
            break
        syllables.append(Syllable(pronunciation=match.group(1), tone=match.group(2)))
        pos = match.end()
    return tuple(syllables)


def parse_pronunciation_block(interior: str) -> tuple[Syllable, ...] | None:
    """Tokenize a block interior, mapping an empty block to ``None``.

    ``[]`` means no pronunciation was provided, which is kept distinct from a
    block that holds syllables.
    """

    if not interior:
        return None
    return parse_syllables(interior)
