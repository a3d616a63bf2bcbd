"""Rendering helpers for parsed syllable sequences."""

from __future__ import annotations

from typing import Sequence

from pypinyin.contrib.tone_convert import to_tone

from cccedict.models import Syllable

MARKED_TONES = {"1", "2", "3", "4"}


def render_numbered(syllables: Sequence[Syllable] | None) -> str:
    """Render syllables as space-separated numbered pinyin or jyutping.

    Args:
        syllables: Parsed syllables, or ``None`` for a missing block.

    Returns:
        Text such as ``ni3 hao3``; empty when there are no syllables.
    """

    if not syllables:
        return ""
    return " ".join(syllable.numbered for syllable in syllables)


def _tone_marked(syllable: Syllable) -> str:
    if syllable.tone not in MARKED_TONES:
        # Neutral (5), missing and out-of-range tones carry no mark.
        return syllable.pronunciation

    marked = to_tone(syllable.numbered.lower())
    if marked.endswith(syllable.tone):
        # No vowel to carry the mark; pypinyin hands the numbered form back.
        return syllable.pronunciation
    if syllable.pronunciation[0].isupper():
        marked = marked[0].upper() + marked[1:]
    return marked


def render_tone_marks(syllables: Sequence[Syllable] | None) -> str:
    """Render pinyin syllables with tone marks, for example ``nǐ hǎo``.

    Tones are not validated; anything other than ``1``-``4`` renders the bare
    pronunciation. Capitalized syllables such as proper nouns stay capitalized.

    Args:
        syllables: Parsed pinyin syllables, or ``None``.

    Returns:
        Space-separated tone-marked pinyin; empty when there are no syllables.
    """

    if not syllables:
        return ""
    return " ".join(_tone_marked(syllable) for syllable in syllables)
