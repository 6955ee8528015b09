"""Split text around emoji runs and normalize the convertible parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Mapping

import regex

from janorm.errors import InvalidArgument
from janorm.textnorm.options import ConversionOptions, resolve_options
from janorm.textnorm.width import ConversionEngine, convert_span


# Unicode general category "So" (Other Symbol): emoji and pictographs.
_SYMBOL_RUN_RE = regex.compile(r"(\p{So}+)")


class SpanKind(str, Enum):
    CONVERTIBLE = "convertible"
    SYMBOL_RUN = "symbol_run"


@dataclass(frozen=True)
class Span:
    kind: SpanKind
    text: str
    start: int
    end: int


def split_symbol_runs(text: str) -> List[Span]:
    """Partition text into alternating convertible spans and symbol runs.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    list[Span]
        Spans in order of appearance. The first span is always convertible
        (possibly empty) and kinds alternate from there.
    """
    spans: List[Span] = []
    offset = 0
    for idx, part in enumerate(_SYMBOL_RUN_RE.split(text)):
        kind = SpanKind.SYMBOL_RUN if idx % 2 else SpanKind.CONVERTIBLE
        spans.append(Span(kind=kind, text=part, start=offset, end=offset + len(part)))
        offset += len(part)
    return spans


def join_spans(spans: Iterable[Span]) -> str:
    """Concatenate spans back into a single string."""
    return "".join(span.text for span in spans)


def normalize(
    text: str,
    options: Mapping[str, Any] | ConversionOptions | None = None,
    engine: ConversionEngine | None = None,
    **overrides: Any,
) -> str:
    """Convert zenkaku alphanumerics, symbols and JIS spaces to ASCII.

    Runs of "Other Symbol" code points (emoji) are kept verbatim and never
    reach the engine.

    Parameters
    ----------
    text : str
        Input text.
    options : Mapping[str, Any] | ConversionOptions | None
        Conversion options; see `resolve_options`.
    engine : Callable[[str, str], str] | None
        Optional conversion engine for dependency injection and testing.
    **overrides : Any
        Option values applied on top of `options` (e.g. `space_width=1`).

    Returns
    -------
    str
        Normalized text.

    Raises
    ------
    InvalidArgument
        If `text` is None or not a string, or the options are invalid.
    ConversionError
        If the engine fails on any span.

    Examples
    --------
    >>> normalize("（あ）", space_width=1)  # doctest: +SKIP
    '(あ)'
    """
    if text is None:
        raise InvalidArgument("normalize() requires a string but got None.")
    if not isinstance(text, str):
        raise InvalidArgument(f"normalize() requires a string but got {type(text).__name__}.")

    resolved = resolve_options(options, **overrides)
    out: List[str] = []
    for span in split_symbol_runs(text):
        if span.kind is SpanKind.SYMBOL_RUN or not span.text:
            out.append(span.text)
        else:
            out.append(convert_span(span.text, resolved, engine=engine))
    return "".join(out)
