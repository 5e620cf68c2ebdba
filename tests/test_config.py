"""Tests for FASTA_* settings and .env loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from fastaparse import config
from fastaparse.errors import ConfigError


def _clear_env(monkeypatch) -> None:
    for key in config.ENVIRONMENT_VARIABLES:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_defaults_without_variables() -> None:
    settings = config.collect_settings(env={})
    assert settings.wrap_width == 80
    assert settings.preview_length == 40
    assert settings.preview_records == 5
    assert settings.skip_unreadable is False


def test_collect_settings_reads_env_file(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "FASTA_WRAP_WIDTH=60",
                "FASTA_PREVIEW_RECORDS=3",
                "FASTA_SKIP_UNREADABLE=yes",
            ]
        ),
        encoding="utf-8",
    )
    nested_dir = tmp_path / "nested" / "deeper"
    nested_dir.mkdir(parents=True)

    settings = config.collect_settings(start_path=nested_dir)

    assert settings.wrap_width == 60
    assert settings.preview_records == 3
    assert settings.preview_length == 40
    assert settings.skip_unreadable is True


def test_env_file_does_not_override_existing_variables(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("FASTA_WRAP_WIDTH", "70")
    (tmp_path / ".env").write_text("FASTA_WRAP_WIDTH=60\n", encoding="utf-8")
    assert config.load_env_file(tmp_path) == (tmp_path / ".env").resolve()
    assert config.collect_settings(start_path=tmp_path).wrap_width == 70


@pytest.mark.parametrize(
    "env",
    [
        {"FASTA_WRAP_WIDTH": "wide"},
        {"FASTA_WRAP_WIDTH": "0"},
        {"FASTA_PREVIEW_LENGTH": "-4"},
        {"FASTA_SKIP_UNREADABLE": "maybe"},
    ],
)
def test_invalid_values_raise(env) -> None:
    with pytest.raises(ConfigError):
        config.collect_settings(env=env)


def test_as_dict_lists_every_variable() -> None:
    assert tuple(config.FastaSettings().as_dict()) == config.ENVIRONMENT_VARIABLES
