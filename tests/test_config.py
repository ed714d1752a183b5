"""Tests for configuration loading and environment overrides."""

import json

import pytest

import config
from config import AppConfig, ValidatorConfig, load_config, to_json


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch, tmp_path):
    for name in ("FRETCHECK_CONFIG_PATH", "FRETCHECK_PRO_MODE", "FRETCHECK_GUITAR_TRACK_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_default_config_candidates", lambda: [tmp_path / "fretcheck_config.json"])
    config.get_config.cache_clear()
    yield
    config.get_config.cache_clear()


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults_without_config_file():
    app_config, resolved_path = load_config()

    assert resolved_path is None
    assert app_config.validator.pro_mode is False
    assert app_config.validator.guitar_track_name == "FiveFretGuitar"


def test_config_file_in_working_directory(tmp_path):
    expected = _write(tmp_path / "fretcheck_config.json", {"validator": {"pro_mode": True}})

    app_config, resolved_path = load_config()

    assert resolved_path == expected
    assert app_config.validator.pro_mode is True


def test_explicit_path_from_environment(monkeypatch, tmp_path):
    explicit = _write(tmp_path / "custom.json", {"validator": {"guitar_track_name": "  Lead  "}})
    monkeypatch.setenv("FRETCHECK_CONFIG_PATH", str(explicit))

    app_config, resolved_path = load_config()

    assert resolved_path == explicit
    assert app_config.validator.guitar_track_name == "Lead"


def test_explicit_missing_path_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("FRETCHECK_CONFIG_PATH", str(tmp_path / "nope.json"))

    with pytest.raises(FileNotFoundError):
        load_config()


@pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("ON", True), ("0", False), ("off", False)])
def test_pro_mode_environment_override(monkeypatch, tmp_path, value, expected):
    path = _write(tmp_path / "fretcheck_config.json", {"validator": {"pro_mode": not expected}})
    monkeypatch.setenv("FRETCHECK_PRO_MODE", value)

    app_config, _ = load_config(path)

    assert app_config.validator.pro_mode is expected


def test_unrecognized_pro_mode_value_is_ignored(monkeypatch):
    monkeypatch.setenv("FRETCHECK_PRO_MODE", "maybe")

    app_config, _ = load_config()

    assert app_config.validator.pro_mode is False


def test_track_name_environment_override(monkeypatch):
    monkeypatch.setenv("FRETCHECK_GUITAR_TRACK_NAME", "Guitar")

    app_config, _ = load_config()

    assert app_config.validator.guitar_track_name == "Guitar"


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        load_config(path)


def test_non_object_root_raises_value_error(tmp_path):
    path = _write(tmp_path / "list.json", [1, 2, 3])

    with pytest.raises(ValueError, match="must be a JSON object"):
        load_config(path)


def test_blank_track_name_fails_validation(tmp_path):
    path = _write(tmp_path / "blank.json", {"validator": {"guitar_track_name": "   "}})

    with pytest.raises(ValueError, match="Config validation failed"):
        load_config(path)


def test_get_config_is_cached(tmp_path):
    first = config.get_config()
    _write(tmp_path / "fretcheck_config.json", {"validator": {"pro_mode": True}})

    assert config.get_config() is first


def test_to_json_round_trip():
    text = to_json(AppConfig(validator=ValidatorConfig(pro_mode=True)))

    assert json.loads(text) == {"validator": {"pro_mode": True, "guitar_track_name": "FiveFretGuitar"}}
