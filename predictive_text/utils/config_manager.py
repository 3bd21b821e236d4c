# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 8,  # interactive prefix completion
    "demo_suggestions": 5,
    "model_path": "learned_model.txt",
    "selection_boost": 5,
    "seed_common_words": True,
    "benchmark_operations": 1000,
}


def _coerce(default, val):
    """Convert `val` (often a CLI string) to the type of `default`."""
    if isinstance(default, bool) and isinstance(val, str):
        low = val.strip().lower()
        if low in ("1", "true", "yes", "on"):
            return True
        if low in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.path)
            return
        for key, val in loaded.items():
            try:
                self.data[key] = _coerce(DEFAULTS[key], val)
            except KeyError:
                logger.warning("Ignoring unknown config option %r in %s", key, self.path)
            except (TypeError, ValueError) as e:
                logger.warning("Ignoring config %s=%r in %s: %s", key, val, self.path, e)

    def save(self):
        try:
            with open(self.path, "w", encoding="utf8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning("Could not write config %s: %s", self.path, e)

    def get(self, key):
        return self.data[key]

    def show(self):
        return [f"{k:20} = {v}" for k, v in self.data.items()]

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(DEFAULTS[key], val)
        self.save()
