"""YAML-backed settings for the command-line tool."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_CONFIG, LOG_LEVELS
from m3uplus.core.env import resolve_config_path
from m3uplus.core.playlist import PlaylistFormat

logger = logging.getLogger(__name__)


def _merge_sections(defaults: Dict[str, Any], user_config: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay user sections on defaults; malformed sections keep the defaults."""
    result: Dict[str, Any] = copy.deepcopy(defaults)
    for section, values in user_config.items():
        base = result.get(section)
        if isinstance(base, dict):
            if isinstance(values, dict):
                base.update(values)
            else:
                logger.warning("Ignoring non-mapping settings section %r", section)
        else:
            result[section] = copy.deepcopy(values)
    return result


@dataclass
class SettingsManager:
    """Simple YAML configuration with default values."""

    config_path: Path = Path("config/settings.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(Path(self.config_path))
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                logger.warning("Settings file %s is not a mapping; using defaults", self.config_path)
                user_config = {}
            self._data = _merge_sections(DEFAULT_CONFIG, user_config)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=True, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def get_output_format(self) -> PlaylistFormat:
        value = self._data.get("output", {}).get("format", DEFAULT_CONFIG["output"]["format"])
        try:
            return PlaylistFormat.from_name(str(value))
        except ValueError:
            return PlaylistFormat.from_name(DEFAULT_CONFIG["output"]["format"])

    def set_output_format(self, playlist_format: PlaylistFormat) -> None:
        output = self._data.setdefault("output", {})
        output["format"] = playlist_format.value

    def get_output_encoding(self) -> str:
        return self._get_encoding("output")

    def get_input_encoding(self) -> str:
        return self._get_encoding("input")

    def _get_encoding(self, section: str) -> str:
        value = self._data.get(section, {}).get("encoding")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_CONFIG[section]["encoding"]

    def get_diagnostics_log_level(self) -> str:
        diagnostics = self._data.get("diagnostics", {})
        level = str(diagnostics.get("log_level", DEFAULT_CONFIG["diagnostics"]["log_level"])).upper()
        return level if level in LOG_LEVELS else DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_diagnostics_log_level(self, level: str) -> None:
        diagnostics = self._data.setdefault("diagnostics", {})
        diagnostics["log_level"] = str(level).upper()

    def get_diagnostics_log_file(self) -> Optional[Path]:
        value = self._data.get("diagnostics", {}).get("log_file")
        if not value:
            return None
        return Path(str(value))
