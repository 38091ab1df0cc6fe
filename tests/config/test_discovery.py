"""Tests for locating payrollctl.toml."""

import logging
from pathlib import Path

import pytest

from payrollctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    resolve_config,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[report]\ncurrency_symbol = "EUR "\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_nearest_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "team"
        child.mkdir()
        (child / CONFIG_FILENAME).write_text("")
        assert find_config(child) == child / CONFIG_FILENAME

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.chdir(tmp_path)
        assert find_config() == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        with caplog.at_level(logging.WARNING, logger="payrollctl.config.discovery"):
            assert find_config(tmp_path) is None
        assert CONFIG_ENV_VAR in caplog.text


class TestResolveConfig:
    def test_explicit_path_beats_discovery(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        explicit = tmp_path / "other.toml"
        explicit.write_text("")
        assert resolve_config(str(explicit), tmp_path) == explicit

    def test_missing_explicit_path_is_ignored(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        with caplog.at_level(logging.WARNING, logger="payrollctl.config.discovery"):
            assert resolve_config(str(tmp_path / "nope.toml"), tmp_path) is None
        assert "--config" in caplog.text

    def test_falls_back_to_discovery(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config(None, tmp_path) == tmp_path / CONFIG_FILENAME
