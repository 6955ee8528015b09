"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from janorm.config import NormalizerConfig, load_config


def test_defaults_without_file_or_env(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml", env={})
    assert config == NormalizerConfig()
    assert config.to_options().extra_flags == "-w"


def test_default_path_is_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "janorm.yaml").write_text("space_width: 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_config(env={}).space_width == 1


def test_file_overrides_defaults(tmp_path: Path) -> None:
    path = tmp_path / "janorm.yaml"
    path.write_text(
        "space_width: 1\nextra_flags: '-x'\nencoding_in: Shift_JIS\nlog_level: debug\n",
        encoding="utf-8",
    )
    config = load_config(path, env={})
    assert config.space_width == 1
    assert config.extra_flags == "-x"
    assert config.encoding_in == "Shift_JIS"
    assert config.log_level == "DEBUG"
    assert config.to_options().extra_flags == "-w -x -S"


def test_env_overrides_file(tmp_path: Path) -> None:
    path = tmp_path / "janorm.yaml"
    path.write_text("space_width: 1\n", encoding="utf-8")
    env = {
        "JANORM_SPACE_WIDTH": "2",
        "JANORM_ENCODING_OUT": "EUC-JP",
        "JANORM_LOG_LEVEL": "warning",
    }
    config = load_config(path, env=env)
    assert config.space_width == 2
    assert config.encoding_out == "EUC-JP"
    assert config.log_level == "WARNING"
    assert config.to_options().extra_flags == "-e"


def test_rejects_directory_path(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="directory"):
        load_config(tmp_path, env={})


def test_rejects_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "janorm.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path, env={})


@pytest.mark.parametrize(
    "env, message",
    [
        ({"JANORM_SPACE_WIDTH": "abc"}, "must be an integer"),
        ({"JANORM_SPACE_WIDTH": "3"}, "space_width must be one of"),
        ({"JANORM_LOG_LEVEL": "chatty"}, "Unknown log_level"),
        ({"JANORM_ENCODING_IN": "latin-1"}, "Unsupported encoding"),
    ],
)
def test_rejects_invalid_values(tmp_path: Path, env: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_config(tmp_path / "missing.yaml", env=env)
