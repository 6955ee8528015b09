"""Locate runs of Japanese script in text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import regex


# Hiragana and Katakana script code points minus the half-width block, the
# prolonged sound marks ー and −, CJK ideographs and 々.
_KANJI_KANA_RE = regex.compile(
    r"(?:[[\p{Hiragana}\p{Katakana}]--[｡-ﾟ]]|[ー−一-龠々])+",
    regex.V1,
)
_HANKAKU_KANA_RE = regex.compile(r"[｡-ﾟ]+")


@dataclass(frozen=True)
class MatchResult:
    start: int
    end: int
    text: str


def _first_match(pattern: regex.Pattern, text: str) -> Optional[MatchResult]:
    match = pattern.search(text)
    if match is None:
        return None
    return MatchResult(start=match.start(), end=match.end(), text=match.group(0))


def match_kanji_kana(text: str) -> Optional[MatchResult]:
    """Return the first run of kanji or full-width kana.

    Half-width kana and full-width punctuation such as 【】 do not match.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    MatchResult | None
        First matching run, or None.
    """
    return _first_match(_KANJI_KANA_RE, text)


def match_hankaku_kana(text: str) -> Optional[MatchResult]:
    """Return the first run of half-width kana (U+FF61-U+FF9F), or None."""
    return _first_match(_HANKAKU_KANA_RE, text)
