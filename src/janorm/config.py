"""Normalizer configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from janorm.constants import DEFAULT_SPACE_WIDTH, SUPPORTED_SPACE_WIDTHS
from janorm.textnorm.options import ConversionOptions, resolve_options


DEFAULT_CONFIG_FILENAME = "janorm.yaml"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class NormalizerConfig:
    space_width: int = DEFAULT_SPACE_WIDTH
    extra_flags: str = ""
    encoding_in: Optional[str] = None
    encoding_out: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def to_options(self) -> ConversionOptions:
        """Return resolved conversion options for this configuration."""
        return resolve_options(
            {
                "space_width": self.space_width,
                "extra_flags": self.extra_flags,
                "encoding_in": self.encoding_in,
                "encoding_out": self.encoding_out,
            }
        )


def _parse_config_file(path: Path | None) -> dict[str, Any]:
    """Parse an optional YAML config file into a dictionary.

    Parameters
    ----------
    path : pathlib.Path | None
        Path to the YAML file, or None to skip parsing.

    Returns
    -------
    dict[str, Any]
        Parsed configuration data.

    Raises
    ------
    ValueError
        If the path is a directory or the YAML root is not a mapping.
    """
    if path is None:
        return {}
    if not path.exists():
        return {}
    if path.is_dir():
        raise ValueError(f"Config path is a directory, expected a file: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("Config file must contain a mapping at the top level.")
    return dict(data)


def _apply_env_overrides(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Override config values using supported environment variables.

    Parameters
    ----------
    config : dict[str, Any]
        Configuration dictionary to update.
    env : Mapping[str, str]
        Environment mapping (typically `os.environ`).

    Returns
    -------
    dict[str, Any]
        Updated configuration with applied overrides.
    """
    def _to_str(value: str, _env_key: str) -> str:
        return str(value)

    def _to_optional_str(value: str, _env_key: str) -> Optional[str]:
        value = str(value).strip()
        return value or None

    def _to_upper_str(value: str, _env_key: str) -> str:
        return str(value).strip().upper()

    def _to_int(value: str, env_key: str) -> int:
        return _coerce_int(value, f"env override {env_key}")

    mapping: dict[str, tuple[str, Any]] = {
        "JANORM_SPACE_WIDTH": ("space_width", _to_int),
        "JANORM_EXTRA_FLAGS": ("extra_flags", _to_str),
        "JANORM_ENCODING_IN": ("encoding_in", _to_optional_str),
        "JANORM_ENCODING_OUT": ("encoding_out", _to_optional_str),
        "JANORM_LOG_LEVEL": ("log_level", _to_upper_str),
    }

    result = dict(config)
    for env_key, (key, caster) in mapping.items():
        if env_key not in env:
            continue
        result[key] = caster(env[env_key], env_key)
    return result


def _coerce_int(value: Any, field: str) -> int:
    """Convert a value to int with a field-specific error message.

    Parameters
    ----------
    value : Any
        Input value to convert.
    field : str
        Field name for error reporting.

    Returns
    -------
    int
        Converted integer value.

    Raises
    ------
    ValueError
        If the value cannot be converted.
    """
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field} must be an integer") from exc


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> NormalizerConfig:
    """Load configuration from defaults, optional file, and environment overrides.

    Parameters
    ----------
    config_path : str | pathlib.Path | None
        Optional path to the YAML config file. If None, `janorm.yaml` in the
        current working directory is used when present.
    env : Mapping[str, str] | None
        Environment mapping. Defaults to `os.environ`.

    Returns
    -------
    NormalizerConfig
        Validated configuration.

    Raises
    ------
    ValueError
        If any configuration values are invalid.
    """
    resolved_path = Path(config_path) if config_path else Path.cwd() / DEFAULT_CONFIG_FILENAME

    defaults: dict[str, Any] = {
        "space_width": DEFAULT_SPACE_WIDTH,
        "extra_flags": "",
        "encoding_in": None,
        "encoding_out": None,
        "log_level": DEFAULT_LOG_LEVEL,
    }
    merged = dict(defaults)
    merged.update(_parse_config_file(resolved_path))
    merged = _apply_env_overrides(merged, os.environ if env is None else env)

    extra_flags = merged["extra_flags"]
    config = NormalizerConfig(
        space_width=_coerce_int(merged["space_width"], "space_width"),
        extra_flags="" if extra_flags is None else str(extra_flags).strip(),
        encoding_in=_optional_str(merged["encoding_in"]),
        encoding_out=_optional_str(merged["encoding_out"]),
        log_level=str(merged["log_level"]).strip().upper(),
    )

    _validate_config(config)
    return config


def _validate_config(config: NormalizerConfig) -> None:
    """Validate configuration values and raise ValueError on invalid settings.

    Parameters
    ----------
    config : NormalizerConfig
        Configuration to validate.

    Returns
    -------
    None

    Raises
    ------
    ValueError
        If any configuration values are invalid.
    """
    if config.space_width not in SUPPORTED_SPACE_WIDTHS:
        raise ValueError(f"space_width must be one of {sorted(SUPPORTED_SPACE_WIDTHS)}")
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ValueError(f"Unknown log_level: {config.log_level}")
    # Unknown encodings raise InvalidArgument, a ValueError.
    config.to_options()
