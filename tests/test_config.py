import logging
from pathlib import Path

import pytest

from extm3u.core.config import DEFAULT_CONFIG, SettingsManager
from extm3u.core.errors import MalformedLineError


def _settings_path(tmp_path: Path) -> Path:
    return tmp_path / "extm3u.yaml"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("EXTM3U_CONFIG_PATH", raising=False)
    monkeypatch.delenv("EXTM3U_CONFIG_DIR", raising=False)


def test_defaults_without_file(tmp_path):
    manager = SettingsManager(config_path=_settings_path(tmp_path))

    assert manager.get_parser_strict() is False
    assert manager.get_diagnostics_log_level() == "WARNING"
    assert manager.get_raw() == DEFAULT_CONFIG


def test_user_file_is_merged_over_defaults(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text("parser:\n  strict: true\n", encoding="utf-8")

    manager = SettingsManager(config_path=path)

    assert manager.get_parser_strict() is True
    assert manager.get_diagnostics_log_level() == "WARNING"


def test_non_mapping_file_is_ignored(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text("- just\n- a list\n", encoding="utf-8")

    manager = SettingsManager(config_path=path)

    assert manager.get_raw() == DEFAULT_CONFIG


def test_invalid_log_level_falls_back(tmp_path):
    path = _settings_path(tmp_path)
    path.write_text("diagnostics:\n  log_level: chatty\n", encoding="utf-8")

    assert SettingsManager(config_path=path).get_diagnostics_log_level() == "WARNING"


def test_settings_persist(tmp_path):
    path = tmp_path / "nested" / "extm3u.yaml"
    manager = SettingsManager(config_path=path)
    manager.set_parser_strict(True)
    manager.set_diagnostics_log_level("debug")
    manager.save()

    reloaded = SettingsManager(config_path=path)

    assert reloaded.get_parser_strict() is True
    assert reloaded.get_diagnostics_log_level() == "DEBUG"


def test_config_dir_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("EXTM3U_CONFIG_DIR", str(tmp_path))
    (tmp_path / "extm3u.yaml").write_text("parser:\n  strict: true\n", encoding="utf-8")

    manager = SettingsManager(config_path=Path("unused.yaml"))

    assert manager.config_path == tmp_path / "extm3u.yaml"
    assert manager.get_parser_strict() is True


def test_config_path_env_override_wins(tmp_path, monkeypatch):
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("EXTM3U_CONFIG_PATH", str(target))
    monkeypatch.setenv("EXTM3U_CONFIG_DIR", str(tmp_path / "other"))

    assert SettingsManager().config_path == target


def test_parse_playlist_uses_configured_strictness(tmp_path):
    manager = SettingsManager(config_path=_settings_path(tmp_path))
    text = "#EXTM3U\n#EXTINF:5\nclip.mp4"

    assert len(manager.parse_playlist(text)) == 1

    manager.set_parser_strict(True)
    with pytest.raises(MalformedLineError):
        manager.parse_playlist(text)


def test_apply_logging_uses_diagnostics_level(tmp_path, monkeypatch):
    monkeypatch.delenv("LOGLEVEL", raising=False)
    package_logger = logging.getLogger("extm3u")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    path = _settings_path(tmp_path)
    path.write_text("diagnostics:\n  log_level: debug\n", encoding="utf-8")

    try:
        assert SettingsManager(config_path=path).apply_logging() == logging.DEBUG
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)


def test_blank_env_override_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("EXTM3U_CONFIG_PATH", "  ")
    monkeypatch.setenv("EXTM3U_CONFIG_DIR", str(tmp_path))

    assert SettingsManager().config_path == tmp_path / "extm3u.yaml"
