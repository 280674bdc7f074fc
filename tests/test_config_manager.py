"""
Prize Wheel - 设置加载与条目解析测试
"""

import json

from core.config_manager import load_settings, parse_entries
from core.constants import DEFAULT_SETTINGS
from models.wheel_model import Entry


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "nope.json"))
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "wheel.json"
    path.write_text(json.dumps({
        "language": "zh-CN",
        "entries": ["A", "B"],
        "unknown": 1,
    }), encoding="utf-8")

    settings = load_settings(str(path))
    assert settings["language"] == "zh-CN"
    assert settings["entries"] == ["A", "B"]
    assert settings["surface_size"] == DEFAULT_SETTINGS["surface_size"]
    assert "unknown" not in settings


def test_malformed_file_falls_back(tmp_path):
    path = tmp_path / "wheel.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_SETTINGS


def test_parse_entries():
    entries = parse_entries(["A", {"label": "B", "weight": 3}, Entry("C"), 42, None])
    assert entries == [Entry("A"), Entry("B"), Entry("C")]


def test_parse_entries_defaults_to_empty():
    assert parse_entries(None) == []
    assert parse_entries([]) == []
    assert parse_entries([{}]) == [Entry("")]


def test_entry_round_trip():
    assert Entry.from_dict({"label": "Prize", "x": 1}).to_dict() == {"label": "Prize"}
