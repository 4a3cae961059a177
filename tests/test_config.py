from pathlib import Path

import pytest

from m3uplus.core.config import DEFAULT_CONFIG, SettingsManager
from m3uplus.core.playlist import PlaylistFormat


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    monkeypatch.delenv("M3UPLUS_CONFIG_PATH", raising=False)
    monkeypatch.delenv("M3UPLUS_CONFIG_DIR", raising=False)


def _settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yaml"


def test_defaults_without_file(tmp_path):
    manager = SettingsManager(config_path=_settings_path(tmp_path))

    assert manager.get_output_format() is PlaylistFormat.PLUS
    assert manager.get_input_encoding() == "utf-8"
    assert manager.get_output_encoding() == "utf-8"
    assert manager.get_diagnostics_log_level() == "WARNING"
    assert manager.get_diagnostics_log_file() is None
    assert manager.get_raw() == DEFAULT_CONFIG


def test_settings_persist(tmp_path):
    path = _settings_path(tmp_path)
    manager = SettingsManager(config_path=path)
    manager.set_output_format(PlaylistFormat.BASIC)
    manager.set_diagnostics_log_level("debug")
    manager.save()

    reloaded = SettingsManager(config_path=path)

    assert reloaded.get_output_format() is PlaylistFormat.BASIC
    assert reloaded.get_diagnostics_log_level() == "DEBUG"


def test_partial_user_config_keeps_other_defaults(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text("input:\n  encoding: latin-1\ndiagnostics:\n  log_file: logs/m3u.log\n", encoding="utf-8")

    manager = SettingsManager(config_path=path)

    assert manager.get_input_encoding() == "latin-1"
    assert manager.get_output_encoding() == "utf-8"
    assert manager.get_diagnostics_log_level() == "WARNING"
    assert manager.get_diagnostics_log_file() == Path("logs/m3u.log")


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text(
        "output:\n  format: xspf\n  encoding: ''\ndiagnostics:\n  log_level: LOUD\ninput: nope\n",
        encoding="utf-8",
    )

    manager = SettingsManager(config_path=path)

    assert manager.get_output_format() is PlaylistFormat.PLUS
    assert manager.get_output_encoding() == "utf-8"
    assert manager.get_diagnostics_log_level() == "WARNING"
    assert manager.get_input_encoding() == "utf-8"


def test_non_mapping_file_uses_defaults(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text("- just\n- a list\n", encoding="utf-8")

    manager = SettingsManager(config_path=path)

    assert manager.get_raw() == DEFAULT_CONFIG


def test_config_dir_environment_override(tmp_path, monkeypatch):
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text("output:\n  format: m3u\n", encoding="utf-8")
    monkeypatch.setenv("M3UPLUS_CONFIG_DIR", str(config_dir))

    manager = SettingsManager(config_path=tmp_path / "ignored.yaml")

    assert manager.config_path == config_dir / "settings.yaml"
    assert manager.get_output_format() is PlaylistFormat.BASIC
