"""Conversion option merging for the NKF width converter."""

from __future__ import annotations

import codecs
import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError, field_validator

from janorm.constants import DEFAULT_SPACE_WIDTH, SUPPORTED_SPACE_WIDTHS, UNICODE_OUTPUT_FLAG
from janorm.errors import InvalidArgument


# Python codec name -> (NKF input flag, NKF output flag)
NKF_ENCODING_FLAGS: dict[str, tuple[str, str]] = {
    "iso2022_jp": ("-J", "-j"),
    "euc_jp": ("-E", "-e"),
    "shift_jis": ("-S", "-s"),
    "utf-8": ("-W", "-w"),
}

_OUTPUT_DIRECTION_RE = re.compile(r"(^| )-[jesw]")
# Encoding selectors other than the bare -J/-E/-S/-W and -j/-e/-s/-w flags.
_ENCODING_VARIANT_RE = re.compile(r"^(?:-[jeswJESW]\S+|--(?:ic|oc|input-encoding|output-encoding)=\S*)$")


class ConversionOptions(BaseModel):
    """Options for a single width conversion call.

    `space_width` is the number of ASCII spaces a JIS full-width space
    (U+3000) expands to.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    extra_flags: StrictStr = ""
    encoding_in: Optional[StrictStr] = None
    encoding_out: Optional[StrictStr] = None
    space_width: StrictInt = DEFAULT_SPACE_WIDTH

    @field_validator("space_width", mode="before")
    @classmethod
    def _default_space_width(cls, value: Any) -> Any:
        return DEFAULT_SPACE_WIDTH if value is None else value

    @field_validator("space_width")
    @classmethod
    def _check_space_width(cls, value: int) -> int:
        if value not in SUPPORTED_SPACE_WIDTHS:
            raise ValueError(f"space_width must be one of {sorted(SUPPORTED_SPACE_WIDTHS)}, got {value}")
        return value


def canonical_encoding(tag: str) -> str:
    """Resolve an encoding tag to the codec name NKF understands.

    Parameters
    ----------
    tag : str
        Encoding name or alias (e.g. "Shift_JIS", "sjis", "EUC-JP").

    Returns
    -------
    str
        Python codec name that is a key of `NKF_ENCODING_FLAGS`.

    Raises
    ------
    InvalidArgument
        If the tag is unknown or has no NKF flag.
    """
    try:
        name = codecs.lookup(tag).name
    except LookupError as exc:
        raise InvalidArgument(f"Unknown encoding: {tag}") from exc
    if name not in NKF_ENCODING_FLAGS:
        raise InvalidArgument(
            f"Unsupported encoding: {tag}. Must be one of {sorted(NKF_ENCODING_FLAGS)}."
        )
    return name


def encoding_flag(tag: str, for_input: bool = True) -> str:
    """Return the NKF flag selecting `tag` for the input or the output side."""
    flag_in, flag_out = NKF_ENCODING_FLAGS[canonical_encoding(tag)]
    return flag_in if for_input else flag_out


def _append_flag(flags: str, flag: str) -> str:
    if flag in flags.split():
        return flags
    return f"{flags} {flag}".strip()


def resolve_options(
    user_options: Mapping[str, Any] | ConversionOptions | None = None,
    **overrides: Any,
) -> ConversionOptions:
    """Merge user options over the defaults and add the encoding flags.

    Parameters
    ----------
    user_options : Mapping[str, Any] | ConversionOptions | None
        Caller options. Unknown keys are ignored.
    **overrides : Any
        Keyword values applied on top of `user_options`.

    Returns
    -------
    ConversionOptions
        Options whose `extra_flags` carry the encoding flags and, unless an
        output encoding was chosen, the Unicode output flag.

    Raises
    ------
    InvalidArgument
        If an option has the wrong type, `space_width` is unsupported, an
        encoding tag is unknown, or `extra_flags` holds an encoding selector
        other than the bare NKF direction flags.
    """
    if isinstance(user_options, ConversionOptions):
        merged: dict[str, Any] = user_options.model_dump()
    else:
        merged = dict(user_options or {})
    merged.update(overrides)

    try:
        options = ConversionOptions.model_validate(merged)
    except ValidationError as exc:
        raise InvalidArgument(f"Invalid conversion options: {exc}") from exc

    flags = options.extra_flags.strip()
    for token in flags.split():
        if _ENCODING_VARIANT_RE.match(token):
            raise InvalidArgument(
                f"Unsupported encoding flag in extra_flags: {token}. "
                "Use encoding_in or encoding_out instead."
            )
    if options.encoding_in:
        flags = _append_flag(flags, encoding_flag(options.encoding_in, for_input=True))
    if options.encoding_out:
        flags = _append_flag(flags, encoding_flag(options.encoding_out, for_input=False))

    if not _OUTPUT_DIRECTION_RE.search(flags):
        flags = f"{UNICODE_OUTPUT_FLAG} {flags}".strip()

    return options.model_copy(update={"extra_flags": flags})
