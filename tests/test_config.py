"""Tests for configuration loading."""

from pathlib import Path

import pytest

from concert_catalog.core.config import (
    Config,
    SearchConfig,
    create_default_config,
    get_config_dir,
    get_data_dir,
    get_log_file_path,
    load_config,
    parse_config,
)


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Point XDG dirs at tmp_path and clear env overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("CONCERT_CATALOG_PATH", raising=False)
    return tmp_path


class TestDirectories:
    def test_xdg_dirs(self, isolated_dirs):
        assert get_config_dir() == isolated_dirs / "config" / "concert-catalog"
        assert get_data_dir() == isolated_dirs / "data" / "concert-catalog"

    def test_default_catalog_path(self, isolated_dirs):
        config = Config()
        assert config.catalog.catalog_path == str(
            isolated_dirs / "data" / "concert-catalog" / "catalog.json"
        )

    def test_log_file_path(self, isolated_dirs):
        config = Config()
        assert get_log_file_path(config) == (
            isolated_dirs / "data" / "concert-catalog" / "concert-catalog.log"
        )
        config.logging.log_file = "/tmp/custom.log"
        assert get_log_file_path(config) == Path("/tmp/custom.log")


class TestParseConfig:
    """Building Config from TOML data."""

    def test_empty(self, isolated_dirs):
        assert parse_config({}) == Config()

    def test_sections(self, isolated_dirs):
        config = parse_config(
            {
                "catalog": {"catalog_path": "/srv/shows.json", "image_base_url": "/art"},
                "search": {"result_limit": 5},
                "logging": {"level": "debug", "console_output": True},
            }
        )
        assert config.catalog.catalog_path == "/srv/shows.json"
        assert config.catalog.image_base_url == "/art"
        assert config.search.result_limit == 5
        assert config.search.shows_per_artist == 20
        assert config.logging.level == "DEBUG"
        assert config.logging.console_output is True

    def test_invalid_search_falls_back(self, isolated_dirs):
        """Non-positive limits are replaced by defaults."""
        config = parse_config({"search": {"result_limit": 0}})
        assert config.search == SearchConfig()

    def test_validate(self):
        with pytest.raises(ValueError, match="result_limit"):
            SearchConfig(result_limit=-1).validate()
        with pytest.raises(ValueError, match="shows_per_artist"):
            SearchConfig(shows_per_artist=0).validate()


class TestLoadConfig:
    """Reading config.toml from disk."""

    def test_creates_default_file(self, isolated_dirs):
        path = isolated_dirs / "new" / "config.toml"
        config = load_config(path)
        assert path.exists()
        assert path.read_text(encoding="utf-8") == create_default_config()
        assert config == Config()

    def test_default_file_parses_to_defaults(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text(create_default_config(), encoding="utf-8")
        assert load_config(path) == Config()

    def test_reads_file(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text('[search]\nresult_limit = 7\n', encoding="utf-8")
        assert load_config(path).search.result_limit == 7

    def test_malformed_file_uses_defaults(self, isolated_dirs):
        path = isolated_dirs / "config.toml"
        path.write_text("[search\nresult_limit = ", encoding="utf-8")
        assert load_config(path) == Config()

    def test_env_override(self, isolated_dirs, monkeypatch):
        path = isolated_dirs / "config.toml"
        path.write_text('[catalog]\ncatalog_path = "/srv/a.json"\n', encoding="utf-8")
        monkeypatch.setenv("CONCERT_CATALOG_PATH", "/srv/b.json")
        assert load_config(path).catalog.catalog_path == "/srv/b.json"
