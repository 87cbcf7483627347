"""Sampling configuration loader."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .schema import Profile

__all__ = ["DEFAULT_CONFIG_PATH", "load_config", "deep_update"]

DEFAULT_CONFIG_PATH = "configs/sampling.yaml"


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise TypeError(f"Top-level YAML at {path} must be a mapping")
        return data


def deep_update(base: dict, override: Mapping[str, Any]) -> dict:
    """Return a copy of *base* with *override* merged in recursively."""
    result = deepcopy(base)
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(result.get(k), dict):
            result[k] = deep_update(result[k], v)
        else:
            result[k] = deepcopy(v)
    return result


def load_config(
    path: str | Path | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Profile:
    """Load ``path`` (default ``configs/sampling.yaml``), apply ``overrides``
    and return a validated :class:`Profile`.

    A missing default file counts as empty; a missing explicit ``path`` raises
    ``FileNotFoundError``.  ``sampling.region`` in ``overrides`` replaces the
    file's region as a whole, since its two forms are exclusive.
    """
    if path is None:
        raw = _read_yaml(DEFAULT_CONFIG_PATH)
    else:
        if not Path(path).exists():
            raise FileNotFoundError(f"config not found: {path}")
        raw = _read_yaml(path)

    if overrides:
        raw = deep_update(raw, overrides)
        region = (overrides.get("sampling") or {}).get("region")
        if region is not None:
            raw["sampling"]["region"] = deepcopy(dict(region))

    return Profile.model_validate(raw)
