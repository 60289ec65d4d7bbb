"""
Load and expose paletter config (YAML): starting palette, storage location
and logging. Every key is optional; missing ones fall back to the defaults.
"""
from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

DEFAULT_COLORS = [
    "lch(50 92 52)",
    "lch(50 91 95)",
    "lch(50 110 130)",
    "lch(50 50 270)",
    "lch(50 0 0)",
]

DEFAULT_SHADES = [5, 25, 50, 75, 95]


def _defaults() -> dict[str, Any]:
    return {
        "palette": {
            "colors": list(DEFAULT_COLORS),
            "shades": list(DEFAULT_SHADES),
            "background": "white",
            "format": "hex",
            "swap_colors": False,
            "shade_policy": "blend",
        },
        "storage": {"path": None},
        "logging": {"level": "INFO", "file": None},
    }


def default_config() -> dict[str, Any]:
    return _defaults()


def merge_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Overlay ``data`` on the defaults, one section at a time."""
    config = _defaults()
    for section, values in (data or {}).items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(copy.deepcopy(values))
        else:
            config[section] = copy.deepcopy(values)
    return config


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load config from YAML. A missing path or file yields the defaults."""
    if config_path is None:
        return _defaults()
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return merge_config(data)
