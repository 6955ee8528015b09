"""Tests for emoji-aware segmentation and normalization."""

from __future__ import annotations

from typing import Callable

import pytest

from janorm.errors import ConversionError, InvalidArgument
from janorm.textnorm.segments import Span, SpanKind, join_spans, normalize, split_symbol_runs


def test_split_alternates_starting_with_convertible() -> None:
    spans = split_symbol_runs("BGM🐏🌙abc")
    assert spans == [
        Span(kind=SpanKind.CONVERTIBLE, text="BGM", start=0, end=3),
        Span(kind=SpanKind.SYMBOL_RUN, text="🐏🌙", start=3, end=5),
        Span(kind=SpanKind.CONVERTIBLE, text="abc", start=5, end=8),
    ]


def test_split_leading_symbol_run_has_empty_first_span() -> None:
    spans = split_symbol_runs("🐏x")
    assert [span.text for span in spans] == ["", "🐏", "x"]
    assert spans[1].kind is SpanKind.SYMBOL_RUN


def test_split_empty_text() -> None:
    assert split_symbol_runs("") == [Span(kind=SpanKind.CONVERTIBLE, text="", start=0, end=0)]


@pytest.mark.parametrize(
    "text",
    ["", "plain", "🐏", "🐏🌙", "a🐏b🌙c", "ＢGＭ弾きます🐏🌙【高音質】", "〒100　東京☀"],
)
def test_join_reconstructs_original(text: str) -> None:
    assert join_spans(split_symbol_runs(text)) == text


def test_normalize_converts_only_convertible_spans(zenkaku_engine: Callable[[str, str], str]) -> None:
    seen: list[str] = []

    def _engine(flags: str, text: str) -> str:
        seen.append(text)
        return zenkaku_engine(flags, text)

    out = normalize("ＢGＭ弾きます🐏🌙【高音質】！", engine=_engine, space_width=1)
    assert out == "BGM弾きます🐏🌙【高音質】!"
    assert seen == ["ＢGＭ弾きます", "【高音質】！"]


def test_normalize_uses_space_width(zenkaku_engine: Callable[[str, str], str]) -> None:
    assert normalize("Ａ　Ｂ", engine=zenkaku_engine) == "A  B"
    assert normalize("Ａ　Ｂ", {"space_width": 1}, engine=zenkaku_engine) == "A B"


def test_normalize_passes_resolved_flags() -> None:
    flags_seen = []

    def _engine(flags: str, text: str) -> str:
        flags_seen.append(flags)
        return text

    normalize("abc", {"encoding_in": "EUC-JP"}, engine=_engine)
    assert flags_seen == ["-m0 -Z2 -w -E"]


def test_normalize_symbol_only_and_empty_skip_engine() -> None:
    def _engine(_flags: str, _text: str) -> str:
        raise AssertionError("engine should not be called")

    assert normalize("", engine=_engine) == ""
    assert normalize("🐏🌙", engine=_engine) == "🐏🌙"


def test_normalize_is_fixed_point_on_ascii(zenkaku_engine: Callable[[str, str], str]) -> None:
    text = "Hello, world 123!"
    once = normalize(text, engine=zenkaku_engine)
    assert once == text
    assert normalize(once, engine=zenkaku_engine) == once


def test_normalize_rejects_missing_text() -> None:
    with pytest.raises(InvalidArgument, match="got None"):
        normalize(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument, match="got int"):
        normalize(42)  # type: ignore[arg-type]


def test_span_failure_aborts_whole_call() -> None:
    calls = {"count": 0}

    def _engine(_flags: str, text: str) -> str:
        calls["count"] += 1
        if calls["count"] == 2:
            raise ConversionError("rejected")
        return text

    with pytest.raises(ConversionError, match="rejected"):
        normalize("a🐏b", engine=_engine)


def test_normalize_with_real_nkf() -> None:
    pytest.importorskip("nkf")

    out = normalize("ＢGＭ弾きます【高音質】！!!！！", space_width=1)
    assert "【高音質】" in out
    assert "BGM" in out
    assert "!!!!!" in out

    out = normalize("BGM弾きます🐏🌙【高音質】", space_width=1)
    assert "🐏🌙" in out
    assert "【高音質】" in out
    assert "BGM" in out


def test_real_nkf_is_fixed_point_on_normalized_text() -> None:
    pytest.importorskip("nkf")

    once = normalize("ＡＢＣ　日本語　１２３", space_width=1)
    assert once == "ABC 日本語 123"
    assert normalize(once, space_width=1) == once


def test_normalize_rejects_encoding_flag_variants() -> None:
    def _engine(_flags: str, _text: str) -> str:
        raise AssertionError("engine should not be called")

    with pytest.raises(InvalidArgument, match="-w16"):
        normalize("ＡＢＣ", {"extra_flags": "-w16"}, engine=_engine)
