"""Unit tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from shiftjis2utf8.config import load_run_config
from shiftjis2utf8.errors import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".shiftjis2utf8.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_config_returns_none(tmp_path: Path) -> None:
    assert load_run_config(tmp_path / "absent.yaml") is None


def test_files_mode_config(tmp_path: Path) -> None:
    config = load_run_config(
        _write(tmp_path, "mode: files\nfiles:\n  - job/tmp/sample_01.log\n  - 'test*.log'\n")
    )
    assert config is not None
    assert config.mode == "files"
    assert config.files == ("job/tmp/sample_01.log", "test*.log")


def test_dir_mode_defaults(tmp_path: Path) -> None:
    config = load_run_config(_write(tmp_path, "mode: dir\n"))
    assert config is not None
    assert config.directory == Path(".")
    assert config.patterns == ("*.txt",)
    assert config.depth == 1


def test_dir_mode_explicit_values(tmp_path: Path) -> None:
    config = load_run_config(
        _write(tmp_path, "mode: dir\ndir: ./test/tmp\ndepth: 2\npatterns: ['*.md', '*.log']\n")
    )
    assert config is not None
    assert config.directory == Path("./test/tmp")
    assert config.patterns == ("*.md", "*.log")
    assert config.depth == 2


def test_clear_mode_config(tmp_path: Path) -> None:
    config = load_run_config(_write(tmp_path, "mode: clear\n"))
    assert config is not None and config.mode == "clear"


@pytest.mark.parametrize(
    "text",
    [
        "mode: files\n",
        "mode: files\nfiles: []\n",
        "mode: unknown\n",
        "mode: dir\ndepth: -1\n",
        "mode: dir\nextra: 1\n",
        "mode: dir\npatterns: [' ']\n",
        "mode: dir\npatterns: ' , '\n",
        "- just\n- a list\n",
        "mode: [unclosed\n",
    ],
)
def test_invalid_configs_raise(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_run_config(_write(tmp_path, text))
