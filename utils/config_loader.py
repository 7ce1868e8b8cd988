import copy
from pathlib import Path

import yaml

DEFAULT_CONFIG = {
    "settings": {
        "city": "Hawler",
        "iso": "IQ",
        "timezone": "Asia/Baghdad",
        "language": "ku",
    },
    "database": {
        "path": "player.db",
    },
    "data_window": {"start": "02-18", "end": "03-19"},
    "ramadan": {"start": "02-18", "end": "03-19"},
    "api": {
        "host": "127.0.0.1",
        "port": 8000,
        "base_url": "http://127.0.0.1:8000",
        "cors_origins": ["http://localhost:3000", "http://localhost:8000"],
    },
    "display": {"view": "today", "refresh_seconds": 1},
    "logging": {"level": "INFO", "dir": "assets/logs"},
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: str = "config.yml") -> dict:
    """Load YAML configuration file, filling gaps from DEFAULT_CONFIG."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found at {config_file.resolve()}")
    with open(config_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError("Invalid config format: root must be a mapping")

    return _merge(DEFAULT_CONFIG, data)
