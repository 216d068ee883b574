from autosave.config.loader import SettingsStore, format_settings, parse_interval, parse_settings
from autosave.config.schema import AutoSaveSettings, ToggleConfig
from autosave.errors import SettingsStoreError

import pytest


def test_load_creates_default_file_when_missing(tmp_path):
    path = tmp_path / "AutoSave.txt"
    config = SettingsStore(path).load()

    assert config.enabled is True
    assert config.interval_seconds == 600
    assert path.read_bytes() == b"IsEnabled=true\r\nSavesFrequency=600\r\n"


def test_save_then_load_round_trip(tmp_path):
    store = SettingsStore(tmp_path / "AutoSave.txt")
    store.save(ToggleConfig(enabled=False, interval_seconds=42))

    loaded = store.load()

    assert loaded.enabled is False
    assert loaded.interval_seconds == 42


def test_legacy_bare_lines_parse(tmp_path):
    path = tmp_path / "AutoSave.txt"
    path.write_text("false\r\n300\r\n", encoding="utf-8")

    config = SettingsStore(path).load()

    assert config.enabled is False
    assert config.interval_seconds == 300


def test_boolean_matches_anywhere_case_insensitive():
    assert parse_settings("Feature is TRUE here").enabled is True
    assert parse_settings("IsEnabled=False").enabled is False


def test_unknown_and_malformed_lines_are_ignored(log_messages):
    content = "# comment\r\nSavesFrequency=abc\r\nSavesFrequency=0\r\nSavesFrequency=2000000001\r\nhello\r\n"
    config = parse_settings(content, ToggleConfig(enabled=False, interval_seconds=120))

    assert config.enabled is False
    assert config.interval_seconds == 120
    assert any("Ignoring invalid saves frequency" in m for m in log_messages)


def test_keyed_frequency_and_bounds():
    assert parse_settings("SavesFrequency=1").interval_seconds == 1
    assert parse_settings("SavesFrequency=2000000000").interval_seconds == 2_000_000_000
    assert parse_settings("SavesFrequency=99999999999").interval_seconds == 600


def test_parse_interval_rejects_signs_and_blanks():
    assert parse_interval(" 15 ") == 15
    assert parse_interval("-5") is None
    assert parse_interval("") is None


def test_format_uses_crlf():
    assert format_settings(ToggleConfig()) == "IsEnabled=true\r\nSavesFrequency=600\r\n"


def test_unreadable_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "AutoSave.txt"
    path.mkdir()

    config = SettingsStore(path).load()

    assert config == ToggleConfig()


def test_save_failure_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    store = SettingsStore(blocker / "AutoSave.txt")

    with pytest.raises(SettingsStoreError):
        store.save(ToggleConfig())


def test_settings_paths_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("AUTOSAVE_MODS_DIR", str(tmp_path))
    monkeypatch.setenv("AUTOSAVE_MOD_NAME", "AutoSave")

    settings = AutoSaveSettings()

    assert settings.mod_name == "AutoSave"
    assert settings.settings_path == tmp_path / "AutoSave.txt"
    assert settings.runtime_config_path == tmp_path / "RuntimeConfiguration.xml"
