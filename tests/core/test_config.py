"""Tests for configuration loading."""

from pathlib import Path

from mpv_mp.core.config import (
    Config,
    get_config_path,
    get_data_dir,
    load_config,
    parse_config,
)


class TestPaths:
    """Tests for XDG path resolution."""

    def test_config_path_uses_xdg(self, tmp_path):
        assert get_config_path() == tmp_path / "config" / "mpv-mp" / "config.toml"

    def test_data_dir_uses_xdg(self, tmp_path):
        assert get_data_dir() == tmp_path / "data" / "mpv-mp"

    def test_fallback_to_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_DATA_HOME")
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert get_data_dir() == tmp_path / "home" / ".local" / "share" / "mpv-mp"


class TestParseConfig:
    """Tests for parse_config."""

    def test_empty(self):
        assert parse_config({}) == Config()

    def test_logging_section(self):
        config = parse_config(
            {
                "logging": {
                    "level": "debug",
                    "log_file": "~/mpv-mp.log",
                    "console_output": True,
                    "backup_count": 2,
                }
            }
        )
        assert config.logging.level == "DEBUG"
        assert config.logging.log_file == str(Path("~/mpv-mp.log").expanduser())
        assert config.logging.console_output is True
        assert config.logging.backup_count == 2
        assert config.logging.max_file_size_mb == 10

    def test_invalid_level_falls_back(self):
        assert parse_config({"logging": {"level": "LOUD"}}).logging.level == "INFO"

    def test_ui_section(self):
        assert parse_config({"ui": {"use_colors": False}}).ui.use_colors is False


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config() == Config()
        # never created behind the user's back
        assert not get_config_path().exists()

    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "WARNING"\n\n[ui]\nuse_colors = false\n')
        config = load_config(path)
        assert config.logging.level == "WARNING"
        assert config.ui.use_colors is False

    def test_invalid_toml_gives_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[logging\nlevel = ")
        assert load_config(path) == Config()
