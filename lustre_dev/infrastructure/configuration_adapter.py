"""Configuration adapter implementation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class ConfigurationAdapter:
    """Adapter reading preview defaults from YAML or JSON files."""

    def load_configuration(self, path: str) -> dict[str, Any]:
        """Load configuration from the specified path."""
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            content = config_path.read_text(encoding="utf-8")

            # Determine format based on extension
            if path.endswith(".json"):
                config = json.loads(content)
            else:
                config = yaml.safe_load(content) or {}
        except Exception as e:
            raise ValueError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Invalid configuration file {path}: expected a mapping")

        return {str(key).replace("-", "_"): value for key, value in config.items()}
