"""Public entry points: language guessing and tolerant normalization."""

from __future__ import annotations

import logging
from typing import Any

from janorm.constants import COMPACT_SPACE_WIDTH, LANG_EN, LANG_JA
from janorm.textnorm.script_match import match_kanji_kana
from janorm.textnorm.segments import normalize
from janorm.textnorm.width import ConversionEngine


_logger = logging.getLogger(__name__)


def guess_language(text: str, engine: ConversionEngine | None = None) -> str:
    """Guess whether text is Japanese.

    Zenkaku digits and symbols are converted to ASCII first, so only a real
    kana/kanji run counts.

    Parameters
    ----------
    text : str
        Input text.
    engine : Callable[[str, str], str] | None
        Optional conversion engine for dependency injection and testing.

    Returns
    -------
    str
        "ja" if a kana/kanji run is present, else "en".

    Raises
    ------
    InvalidArgument
        If `text` is None.
    """
    normalized = normalize(text, engine=engine, space_width=COMPACT_SPACE_WIDTH)
    match = match_kanji_kana(normalized)
    language = LANG_JA if match is not None else LANG_EN
    _logger.debug("Guessed language %s (first run: %r)", language, match.text if match else None)
    return language


def try_normalize(value: Any, engine: ConversionEngine | None = None) -> Any:
    """Normalize and strip strings; return any other value unchanged.

    Parameters
    ----------
    value : Any
        A field value from a heterogeneous record.
    engine : Callable[[str, str], str] | None
        Optional conversion engine for dependency injection and testing.

    Returns
    -------
    Any
        Normalized, stripped string, or `value` itself for non-strings.
    """
    if not isinstance(value, str):
        return value
    return normalize(value, engine=engine, space_width=COMPACT_SPACE_WIDTH).strip()
