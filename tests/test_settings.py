"""JSON settings file handling."""
import json

from navigatr.settings import DEFAULTS, load_settings, save_settings, set_adblock_enabled


def test_first_load_writes_defaults(tmp_path):
    path = tmp_path / "navigatr" / "config.json"
    settings = load_settings(path)
    assert settings == DEFAULTS
    assert json.loads(path.read_text()) == DEFAULTS


def test_loaded_settings_do_not_alias_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    settings["adblock"]["extra_domains"].append("ads.test")
    assert DEFAULTS["adblock"]["extra_domains"] == []


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"search": {"url": "https://www.google.com/search?q="}}))
    settings = load_settings(path)
    assert settings["search"]["url"] == "https://www.google.com/search?q="
    assert settings["adblock"] == {"enabled": True, "extra_domains": []}
    assert settings["log"]["level"] == "INFO"


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_settings(path) == DEFAULTS


def test_non_object_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    assert load_settings(path) == DEFAULTS


def test_adblock_flag_must_be_a_bool(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"adblock": {"enabled": "no", "extra_domains": "x.test"}}))
    settings = load_settings(path)
    assert settings["adblock"]["enabled"] is True
    assert settings["adblock"]["extra_domains"] == []


def test_malformed_section_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"adblock": 5}))
    assert load_settings(path)["adblock"] == DEFAULTS["adblock"]


def test_set_adblock_enabled_persists(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"adblock": {"enabled": True, "extra_domains": ["ads.test"]}}, path)
    set_adblock_enabled(False, path)
    settings = load_settings(path)
    assert settings["adblock"]["enabled"] is False
    assert settings["adblock"]["extra_domains"] == ["ads.test"]
