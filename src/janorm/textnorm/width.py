"""Zenkaku to hankaku conversion of a single span via NKF."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from janorm.constants import NO_MIME_FLAG, UNICODE_INPUT_FLAG, UNICODE_OUTPUT_FLAG
from janorm.errors import ConversionError
from janorm.textnorm.options import NKF_ENCODING_FLAGS, ConversionOptions


_logger = logging.getLogger(__name__)

_INPUT_CODECS = {flag_in: codec for codec, (flag_in, _) in NKF_ENCODING_FLAGS.items()}
_OUTPUT_CODECS = {flag_out: codec for codec, (_, flag_out) in NKF_ENCODING_FLAGS.items()}

ConversionEngine = Callable[[str, str], str]


class NkfEngine:
    """Conversion engine backed by the `nkf` extension module.

    NKF works on bytes, so the span is encoded with the codec named by the
    input flag in `flags` (UTF-8 if there is none) and the result is decoded
    with the codec named by the output flag.
    """

    def __init__(self, module: Any | None = None) -> None:
        """Initialize the engine.

        Parameters
        ----------
        module : Any | None
            Optional module exposing `nkf(flags, data)`, for dependency
            injection and testing. Defaults to the `nkf` package.
        """
        self._module = module

    def __call__(self, flags: str, text: str) -> str:
        tokens = flags.split()
        codec_in = self._codec_for(tokens, _INPUT_CODECS)
        if codec_in is None:
            codec_in = "utf-8"
            tokens.append(UNICODE_INPUT_FLAG)
        codec_out = self._codec_for(tokens, _OUTPUT_CODECS)
        if codec_out is None:
            codec_out = "utf-8"
            tokens.append(UNICODE_OUTPUT_FLAG)

        module = self._load_module()
        resolved = " ".join(tokens)
        try:
            data = text.encode(codec_in)
            converted = module.nkf(resolved, data)
            return converted.decode(codec_out)
        except Exception as exc:
            raise ConversionError(f"nkf failed with flags {resolved!r}: {exc}") from exc

    @staticmethod
    def _codec_for(tokens: list[str], table: dict[str, str]) -> Optional[str]:
        codec = None
        for token in tokens:
            if token in table:
                codec = table[token]
        return codec

    def _load_module(self) -> Any:
        if self._module is not None:
            return self._module
        try:
            import nkf  # type: ignore
        except Exception as exc:
            raise ConversionError(
                "nkf is not available. Install the nkf package to enable width conversion."
            ) from exc
        return nkf


_default_engine = NkfEngine()


def build_flags(options: ConversionOptions) -> str:
    """Build the NKF flag string for a resolved option set.

    Parameters
    ----------
    options : ConversionOptions
        Options returned by `resolve_options`.

    Returns
    -------
    str
        Flags converting zenkaku alphanumerics and symbols to ASCII, with a JIS
        space expanded to `options.space_width` ASCII spaces.
    """
    return f"{NO_MIME_FLAG} -Z{options.space_width} {options.extra_flags}".strip()


def convert_span(
    text: str,
    options: ConversionOptions,
    engine: ConversionEngine | None = None,
) -> str:
    """Convert one convertible span.

    Parameters
    ----------
    text : str
        Span without any "Other Symbol" code points.
    options : ConversionOptions
        Resolved conversion options.
    engine : Callable[[str, str], str] | None
        Engine called as `engine(flags, text)`. Defaults to `NkfEngine`.

    Returns
    -------
    str
        Converted span.

    Raises
    ------
    ConversionError
        If the engine fails.
    """
    flags = build_flags(options)
    _logger.debug("Converting span of %d chars with flags %r", len(text), flags)
    return (engine or _default_engine)(flags, text)
