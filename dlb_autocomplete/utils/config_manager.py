# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dictionary": None,     # word list loaded at startup (one word per line)
    "max_display": 5,       # predictions listed by /stats
    "show_counts": True,    # show prediction counts after each keystroke
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("could not read config %s (%s), using defaults", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        self.data.update(loaded)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        if default is None or val is None:
            self.data[key] = val
        elif isinstance(default, bool) and isinstance(val, str):
            self.data[key] = val.strip().lower() in ("1", "true", "yes", "on")
        else:
            self.data[key] = type(default)(val)
        self.save()
