# Tint/config.py
import os
from typing import Any, Dict, Optional

import msgpack


DEFAULT_COLORS = {
    "debug": "blue",
    "info": None,
    "warn": "yellow",
    "error": "red",
    "print": None,
}


class Settings:
    """
    Logger settings: default colours per level, minimum level,
    suppression parameters and DSL separators.
    Persisted with MessagePack.
    """

    def __init__(
        self,
        colors: Optional[Dict[str, Any]] = None,
        min_level: str = "DEBUG",
        suppression: Optional[Dict[str, Any]] = None,
        separators: Optional[Dict[str, str]] = None,
    ):
        self.colors = {**DEFAULT_COLORS, **(colors or {})}
        self.min_level = str(min_level).upper()
        self.suppression = {
            "enabled": False,
            "timeout": 1000,
            "show_counter": True,
            **(suppression or {}),
        }
        self.separators = {"command": "|", "param": ".", **(separators or {})}

    def __eq__(self, other):
        return isinstance(other, Settings) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Settings({self.to_dict()!r})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        known = ("colors", "min_level", "suppression", "separators")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "colors": dict(self.colors),
            "min_level": self.min_level,
            "suppression": dict(self.suppression),
            "separators": dict(self.separators),
        }

    # ====================================================================
    # Disk persistence
    # ====================================================================
    def save(self, path: str) -> bool:
        """Persist settings using MessagePack."""
        from Tint.logging import logging_instance as log

        try:
            with open(path, "wb") as f:
                f.write(msgpack.packb(self.to_dict(), use_bin_type=True))
            return True
        except (OSError, TypeError, ValueError) as e:
            log.warn(f"Failed to save settings to '{path}': {e}")
            return False

    @classmethod
    def load(cls, path: str) -> "Settings":
        """Load settings from a MessagePack file; defaults when missing or broken."""
        from Tint.logging import logging_instance as log

        if not os.path.exists(path):
            return cls()
        try:
            with open(path, "rb") as f:
                data = msgpack.unpackb(f.read(), raw=False, strict_map_key=False)
            if not isinstance(data, dict):
                raise ValueError("settings file does not hold a map")
            return cls.from_dict(data)
        except (OSError, ValueError, TypeError, msgpack.exceptions.UnpackException) as e:
            log.warn(f"Settings load failed for '{path}': {e}")
            return cls()
