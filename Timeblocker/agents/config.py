"""
Configuration settings for Timeblocker
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemma3:27b"
DEFAULT_CONFIG_PATH = "timeblocker.json"


def _default_ollama_host() -> str:
    return os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")


@dataclass
class TimeblockerConfig:
    """Settings for the scheduler and its language-model backend"""

    api_key: str = ""
    moveable: bool = True  # drag-and-drop toggle, read by the editor host only
    ollama_host: str = field(default_factory=_default_ollama_host)
    duration_model: str = DEFAULT_MODEL
    datetime_model: str = DEFAULT_MODEL
    temperature: float = 0.0

    @classmethod
    def from_file(cls, config_path: str) -> TimeblockerConfig:
        """Load saved settings from JSON, merged over the defaults"""
        try:
            with open(config_path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load settings from {config_path}: {e}")
            return cls()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {config_path}: not a JSON object")
            return cls()

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug(f"Ignoring unknown settings keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_file(self, config_path: str):
        """Save settings to JSON file"""
        with open(config_path, "w") as f:
            json.dump(asdict(self), f, indent=2)


def get_config(config_path: str | None = None) -> TimeblockerConfig:
    """Load settings from ``config_path``, $TIMEBLOCKER_CONFIG, or the defaults"""
    path = config_path or os.getenv("TIMEBLOCKER_CONFIG", DEFAULT_CONFIG_PATH)
    if os.path.exists(path):
        return TimeblockerConfig.from_file(path)
    return TimeblockerConfig()
