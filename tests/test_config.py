# tests/test_config.py
import json

import pytest
from predictive_text.utils.config_manager import DEFAULTS, Config


def test_creates_file_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert json.loads(path.read_text()) == DEFAULTS


def test_merges_saved_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": 3}))
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("model_path") == DEFAULTS["model_path"]


def test_malformed_file_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert Config(str(path)).data == DEFAULTS


def test_set_coerces_and_saves(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    cfg.set("max_suggestions", "12")
    cfg.set("seed_common_words", "no")
    assert cfg.get("max_suggestions") == 12
    assert cfg.get("seed_common_words") is False
    assert Config(str(path)).get("max_suggestions") == 12


def test_set_rejects_bad_values(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "lots")


def test_loaded_values_are_coerced(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": "3", "seed_common_words": "off"}))
    cfg = Config(str(path))
    assert cfg.get("max_suggestions") == 3
    assert cfg.get("seed_common_words") is False


def test_bad_loaded_values_keep_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"max_suggestions": "lots", "benchmark_operations": None, "theme": "dark"}))
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS
