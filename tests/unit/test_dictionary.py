"""Unit tests for best-effort whole-dictionary loading."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from cccedict.dictionary import Cedict, parse_cedict_lines, scan_cedict_lines, summarize

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "cccanto-sample.txt"

SAMPLE = "\n".join(
    [
        "你嘅 你嘅 [ni3 ge2] {nei5 ge3} /your's (spoken)/",
        "你地 你地 [ni3 di4] {nei5 dei6} /you guys; you all/",
        "你好嗎 你好吗 [ni3 hao3 ma5] {nei5 hou2 maa1} /how are you?/",
    ]
)


def test_cedict_from_str_keeps_every_entry() -> None:
    cedict = Cedict.from_str(SAMPLE)

    assert len(cedict) == 3
    assert [entry.traditional for entry in cedict] == ["你嘅", "你地", "你好嗎"]


def test_cedict_from_file_reads_stream() -> None:
    cedict = Cedict.from_file(io.StringIO(SAMPLE + "\n"))

    assert len(cedict.entries) == 3


def test_cedict_from_path_drops_comments_blanks_and_invalid_lines() -> None:
    cedict = Cedict.from_path(FIXTURE)

    assert [entry.simplified for entry in cedict] == ["你嘅", "你地", "你好吗", "𠆿"]
    assert cedict.entries[2].definitions == ("how are you?",)
    assert cedict.entries[3].pinyin is None


def test_cedict_from_path_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="CC-CEDICT file not found"):
        Cedict.from_path(tmp_path / "missing.u8")


def test_parse_cedict_lines_preserves_input_order_with_crlf() -> None:
    entries = parse_cedict_lines(
        iter(
            [
                "籃 篮 [lan2] /basket (receptacle)/basket (in basketball)/\r\n",
                "broken line\r\n",
                "愛 爱 [ai4] /to love/\r\n",
            ]
        )
    )

    assert [entry.simplified for entry in entries] == ["篮", "爱"]
    assert entries[0].definitions == ("basket (receptacle)", "basket (in basketball)")


def test_scan_and_summarize_fixture() -> None:
    with FIXTURE.open("r", encoding="utf-8") as handle:
        results = scan_cedict_lines(handle)

    assert [result.kind for result in results] == [
        "comment",
        "comment",
        "blank",
        "entry",
        "entry",
        "invalid",
        "entry",
        "entry",
        "invalid",
    ]

    summary = summarize(results)
    assert summary.entries == 4
    assert summary.comments == 2
    assert summary.blanks == 1
    assert summary.invalid_lines == (6, 9)
    assert summary.total_lines == 9
