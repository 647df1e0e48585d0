"""Tests for config discovery and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from zettel.config.discovery import (
    CONFIG_FILENAME,
    ConfigError,
    find_config,
    load_config,
    read_archive_section,
)
from zettel.config.models import ArchiveConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[archive]\next = ".md"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[archive]\next = ".md"\n')
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[archive]\next = ".md"\n')
        monkeypatch.setenv("ZETTEL_CONFIG", str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("ZETTEL_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadArchiveSection:
    def test_relative_root_resolved_against_config_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[archive]\nroot = "notes"\n')
        assert read_archive_section(config_file)["root"] == tmp_path / "notes"

    def test_absolute_root_kept(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[archive]\nroot = "/srv/zettel"\n')
        assert read_archive_section(config_file)["root"] == Path("/srv/zettel")

    def test_missing_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('title = "x"\n')
        assert read_archive_section(config_file) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[archive\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            read_archive_section(config_file)

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('archive = "main"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            read_archive_section(config_file)


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[archive]\nroot = "z"\nkaesten = ["main", "tech"]\next = ".md"\n'
        )
        cfg = load_config(config_file)
        assert cfg.root == tmp_path / "z"
        assert cfg.kaesten == ("main", "tech")
        assert cfg.ext == ".md"

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[archive]\next = ".md"\n')
        assert load_config(cwd=tmp_path).ext == ".md"

    def test_defaults_when_absent(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == ArchiveConfig()
