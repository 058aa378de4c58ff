import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "drevo.yml"
CONFIG_ENV_VAR = "DREVO_CONFIG"

DEFAULT_FAVORITES_CAPACITY = 20
DEFAULT_TREE_MAX_DEPTH = 13


class DrevoConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.limits = data.get("limits", {}) or {}
        self.debug = data.get("debug", False)

    def resolve_path(self, key: str) -> Path | None:
        """Return the configured path for ``key``, anchored at the project root."""
        value = self.paths.get(key)
        if not value:
            return None
        path = Path(value)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    @property
    def favorites_capacity(self) -> int:
        return int(self.limits.get("favorites_capacity", DEFAULT_FAVORITES_CAPACITY))

    @property
    def tree_max_depth(self) -> int:
        return int(self.limits.get("tree_max_depth", DEFAULT_TREE_MAX_DEPTH))


def load_config(path: str | Path | None = None) -> 'DrevoConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return DrevoConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return DrevoConfig(data)

_config_cache = None

def get_config() -> 'DrevoConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` re-reads it."""
    global _config_cache
    _config_cache = None
