"""Configuration management for npstats."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

NPSTATS_HOME = Path(os.environ.get("NPSTATS_HOME", Path.home() / ".npstats"))
CONFIG_FILE = NPSTATS_HOME / "npstats.conf"
TAG_SETTINGS_FILE = NPSTATS_HOME / "tag_stats.json"

DEFAULT_FOLDERS_TO_IGNORE = [
    "@Archive",
    "@Trash",
    "@Templates",
    "@Searches",
    "TEST",
    "Reviews",
    "Saved Searches",
    "Summaries",
]


class ConfigError(ValueError):
    """Raised when settings needed for a run cannot be loaded."""


@dataclass
class Config:
    """npstats configuration."""

    notes_base_dir: str = ""
    output_dir: str = ""
    folders_to_ignore: list[str] = field(default_factory=lambda: list(DEFAULT_FOLDERS_TO_IGNORE))
    file_extensions: list[str] = field(default_factory=lambda: ["md", "txt"])
    tag_settings_file: str = ""

    @property
    def base_dir(self) -> Path:
        return Path(self.notes_base_dir).expanduser() if self.notes_base_dir else Path.cwd()

    @property
    def summaries_dir(self) -> Path:
        if self.output_dir:
            return Path(self.output_dir).expanduser()
        return self.base_dir / "Summaries"

    @property
    def tag_settings_path(self) -> Path:
        if self.tag_settings_file:
            return Path(self.tag_settings_file).expanduser()
        return TAG_SETTINGS_FILE


@dataclass
class TagSettings:
    """Which hashtags and mentions the tag stats count."""

    tags_to_count: list[str] = field(default_factory=list)
    mentions_to_count: list[str] = field(default_factory=list)


def _split_list(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if " #" in value:
        value = value.split(" #")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from npstats.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "notes_base_dir":
                config.notes_base_dir = value
            case "output_dir":
                config.output_dir = value
            case "folders_to_ignore":
                config.folders_to_ignore = _split_list(value)
            case "file_extensions":
                config.file_extensions = [e.lstrip(".") for e in _split_list(value)]
            case "tag_settings_file":
                config.tag_settings_file = value
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config


def load_tag_settings(path: Path) -> TagSettings:
    """
    Load the JSON list of tags and mentions to count.

    There is no sensible default list, so a missing or malformed file raises
    ConfigError.
    """
    try:
        data = json.loads(Path(path).read_text())
    except FileNotFoundError:
        raise ConfigError(f"Tag settings file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read tag settings {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Tag settings {path} must be a JSON object")

    tags = data.get("tags_to_count", [])
    mentions = data.get("mentions_to_count", [])
    for key, value in (("tags_to_count", tags), ("mentions_to_count", mentions)):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"'{key}' in {path} must be a list of strings")
    if not tags and not mentions:
        raise ConfigError(f"Tag settings {path} lists no tags or mentions to count")

    return TagSettings(tags_to_count=tags, mentions_to_count=mentions)
