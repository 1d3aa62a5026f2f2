# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "wordlist": "",  # word list preloaded at startup ("" = none)
    "max_display": 20,  # rows shown by /words and /suggest
    "show_timing": False,
    "log_level": "WARNING",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce(default: Any, val: Any) -> Any:
    """Convert `val` to the type of `default` (bools parsed from text)."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        text = str(val).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


def _convert(key: str, val: Any) -> Any:
    """Coerce `val` for option `key` and check its range."""
    value = _coerce(DEFAULTS[key], val)
    if key == "max_display" and value < 1:
        raise ValueError(f"max_display must be at least 1, got {value}")
    return value


class Config:
    def __init__(self, path: Optional[str] = "trie_config.json"):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path:
            return
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    raw = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("config %s unreadable (%s); using defaults", self.path, e)
                return
            if not isinstance(raw, dict):
                logger.warning("config %s is not a JSON object; using defaults", self.path)
                return
            for k, v in raw.items():
                if k not in DEFAULTS:
                    logger.warning("config %s: ignoring unknown key %r", self.path, k)
                    continue
                try:
                    self.data[k] = _convert(k, v)
                except (TypeError, ValueError):
                    logger.warning("config %s: bad value for %r: %r", self.path, k, v)
        else:
            try:
                self.save()
            except OSError as e:
                logger.warning("config %s not writable (%s); using defaults in memory", self.path, e)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def show(self) -> Dict[str, Any]:
        return dict(self.data)

    def set(self, key: str, val: Any) -> Any:
        """Set and persist one option. KeyError if unknown, ValueError if it does not convert or is out of range."""
        if key not in self.data:
            raise KeyError(key)
        self.data[key] = _convert(key, val)
        self.save()
        return self.data[key]
