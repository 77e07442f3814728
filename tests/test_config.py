"""Tests for configuration loading."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from npstats.config import (
    DEFAULT_FOLDERS_TO_IGNORE,
    TAG_SETTINGS_FILE,
    Config,
    ConfigError,
    load_config,
    load_tag_settings,
)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        with patch("npstats.config.CONFIG_FILE", tmp_path / "missing.conf"):
            config = load_config()
        assert config.notes_base_dir == ""
        assert config.folders_to_ignore == DEFAULT_FOLDERS_TO_IGNORE
        assert config.file_extensions == ["md", "txt"]

    def test_parses_values(self, tmp_path):
        config_file = tmp_path / "npstats.conf"
        config_file.write_text(
            "# npstats settings\n"
            'NOTES_BASE_DIR = "/data/NotePlan Documents"  # quoted\n'
            "OUTPUT_DIR = /data/out # trailing comment\n"
            "FOLDERS_TO_IGNORE = @Archive, @Trash,\n"
            "FILE_EXTENSIONS = .md\n"
            "TAG_SETTINGS_FILE = '/data/tags.json'\n"
            "not a setting\n"
        )
        with patch("npstats.config.CONFIG_FILE", config_file):
            config = load_config()
        assert config.notes_base_dir == "/data/NotePlan Documents"
        assert config.output_dir == "/data/out"
        assert config.folders_to_ignore == ["@Archive", "@Trash"]
        assert config.file_extensions == ["md"]
        assert config.tag_settings_file == "/data/tags.json"

    def test_summaries_dir_defaults_under_base(self):
        config = Config(notes_base_dir="/data/np")
        assert config.summaries_dir == Path("/data/np/Summaries")

    def test_summaries_dir_from_output_dir(self):
        config = Config(notes_base_dir="/data/np", output_dir="/data/out")
        assert config.summaries_dir == Path("/data/out")

    def test_tag_settings_path_default(self):
        assert Config().tag_settings_path == TAG_SETTINGS_FILE


class TestLoadTagSettings:
    def test_valid(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text(json.dumps({"tags_to_count": ["#holiday"], "mentions_to_count": ["@work"]}))
        settings = load_tag_settings(path)
        assert settings.tags_to_count == ["#holiday"]
        assert settings.mentions_to_count == ["@work"]

    def test_mentions_optional(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text(json.dumps({"tags_to_count": ["#holiday"]}))
        assert load_tag_settings(path).mentions_to_count == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_tag_settings(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_tag_settings(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text(json.dumps({"tags_to_count": "#holiday"}))
        with pytest.raises(ConfigError, match="list of strings"):
            load_tag_settings(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text(json.dumps(["#holiday"]))
        with pytest.raises(ConfigError):
            load_tag_settings(path)

    def test_nothing_to_count(self, tmp_path):
        path = tmp_path / "tags.json"
        path.write_text(json.dumps({}))
        with pytest.raises(ConfigError, match="no tags"):
            load_tag_settings(path)
