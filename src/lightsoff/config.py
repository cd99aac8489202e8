from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional

import yaml

DEFAULTS = {
    "progress": False,
    "image": {
        "filename": "lightsoff_{rows}x{cols}.png",
        "on_color": [50, 99, 183],
        "off_color": [226, 224, 233],
    },
}


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if key not in base:
            continue  # unknown keys are ignored
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _check_color(name: str, color) -> None:
    if (
        not isinstance(color, (list, tuple))
        or len(color) != 3
        or not all(isinstance(v, int) and 0 <= v <= 255 for v in color)
    ):
        raise ValueError(f"Invalid {name}: {color!r} (expected [r, g, b])")


def load_config(path: Optional[str] = None) -> dict:
    """Return the solver settings, with values from a YAML file if given."""
    cfg = copy.deepcopy(DEFAULTS)
    if path is None:
        return cfg

    with open(Path(path), "r", encoding="utf-8") as f:
        try:
            doc = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc
    if doc is None:
        return cfg
    if not isinstance(doc, dict) or not isinstance(doc.get("lightsoff", {}), dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping")

    cfg = _merge(cfg, doc.get("lightsoff") or {})
    cfg["progress"] = bool(cfg["progress"])
    _check_color("on_color", cfg["image"]["on_color"])
    _check_color("off_color", cfg["image"]["off_color"])
    return cfg
