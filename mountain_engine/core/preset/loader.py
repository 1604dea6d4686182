# ========================
# file: mountain_engine/core/preset/loader.py
# ========================
from __future__ import annotations
import copy
import json
import os
from typing import Any, Dict, Mapping, Union

from .defaults import DEFAULT_PRESET
from .errors import NotFoundError, PresetError
from .model import MountainPreset, freeze_mapping
from .validators import validate_dict


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise NotFoundError(f"Preset file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise PresetError(f"Preset file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PresetError(f"Preset file {path} must contain a JSON object")
    return data


def load_preset(
    source: Union[str, os.PathLike, Dict[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> MountainPreset:
    """Load a preset from a JSON path or raw dict, merge it over the defaults and apply overrides.

    Args:
        source: file path to JSON, raw dict, or None for the built-in defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        MountainPreset (immutable dataclass) ready for use
    Raises:
        NotFoundError: the path does not exist
        ValidationError: the merged preset is inconsistent
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, (str, os.PathLike)):
        data = _load_json_file(os.fspath(source))
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path, dict or None")

    merged = deep_merge(DEFAULT_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)

    return MountainPreset(
        id=merged["id"],
        total_layers=int(merged["total_layers"]),
        base_circumference=int(merged["base_circumference"]),
        shrink_factor=float(merged["shrink_factor"]),
        layer_height=int(merged["layer_height"]),
        tile_size=int(merged["tile_size"]),
        sampler=str(merged["sampler"]),
        classifier=freeze_mapping(merged["classifier"]),
        ramps=freeze_mapping(merged["ramps"]),
        obstacles=freeze_mapping(merged["obstacles"]),
        transition_margin=float(merged["transition_margin"]),
        export=freeze_mapping(merged["export"]),
    )
