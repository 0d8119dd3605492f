"""
Tests for config.json loading.
"""

import json

from icon_studio.config import DEFAULT_CONFIG
from icon_studio.config_manager import CONFIG, load_config


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "nope.json") == DEFAULT_CONFIG


def test_broken_json_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{ not json", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_non_object_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


def test_partial_file_merges_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"app_settings": {"animation_speed_ms": 100}}), encoding="utf-8")
    config = load_config(path)
    assert config["app_settings"]["animation_speed_ms"] == 100
    assert config["app_settings"]["default_icon_width"] == DEFAULT_CONFIG["app_settings"]["default_icon_width"]
    assert config["theme"] == DEFAULT_CONFIG["theme"]


def test_defaults_not_mutated(tmp_path):
    config = load_config(tmp_path / "nope.json")
    config["app_settings"]["title"] = "changed"
    assert DEFAULT_CONFIG["app_settings"]["title"] != "changed"


def test_shipped_config_loads():
    assert set(CONFIG) >= {"app_settings", "theme"}
    assert CONFIG["app_settings"]["animation_speed_ms"] > 0
