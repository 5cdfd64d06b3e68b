"""
Settings management for lanegraph
"""

import copy
import json
from pathlib import Path
from typing import Any

from lanegraph.constants import DEFAULT_LOG_LIMIT


class Settings:
    """Manages user settings"""

    DEFAULT_SETTINGS = {
        "log": {
            "limit": DEFAULT_LOG_LIMIT,  # Commits read per graph
            "all_refs": True,  # Walk every branch and tag, not just HEAD
        },
        "output": {"format": "text"},
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / ".config" / "lanegraph" / "settings.json"

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                loaded = json.load(f)
                # Merge with defaults to handle new settings
                self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_settings(base[key], value)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'log.limit')"""
        value: Any = self.settings
        for part in path.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_log_limit(self) -> int:
        """Get how many commits to read for one graph."""
        try:
            limit = int(self.get("log.limit", DEFAULT_LOG_LIMIT))
        except (TypeError, ValueError):
            return DEFAULT_LOG_LIMIT
        return max(1, limit)  # At least 1

    def get_all_refs(self) -> bool:
        return bool(self.get("log.all_refs", True))

    def get_output_format(self) -> str:
        """Get the CLI output format, 'text' or 'json'."""
        fmt = str(self.get("output.format", "text"))
        return fmt if fmt in ("text", "json") else "text"
