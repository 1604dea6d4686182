# ========================
# file: mountain_engine/core/preset/validators.py
# ========================
from __future__ import annotations
import math
from typing import Any, Dict

from .errors import ValidationError
from ..constants import TILE_KINDS
from ..utils.rng import SAMPLERS


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValidationError(msg)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)


def _is_int(v: Any) -> bool:
    return _is_number(v) and float(v).is_integer()


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Checks a merged preset dict. Raises ValidationError on the first failing check."""
    _require(isinstance(cfg.get("id"), str) and cfg["id"], "Preset.id must be non-empty string")

    # Geometry
    for key in ("total_layers", "base_circumference", "layer_height", "tile_size"):
        v = cfg.get(key)
        _require(_is_int(v), f"{key} must be a finite integer")
        _require(v >= 1, f"{key} must be >= 1")
    shrink = cfg.get("shrink_factor")
    _require(_is_number(shrink), "shrink_factor must be a finite number")
    _require(0.0 <= shrink <= 1.0, "shrink_factor must be in [0, 1]")
    _require(cfg.get("sampler") in SAMPLERS, f"sampler must be one of {SAMPLERS}")
    _require(_is_number(cfg.get("transition_margin")), "transition_margin must be a finite number")
    _require(
        0 <= cfg["transition_margin"] < cfg["layer_height"],
        "transition_margin must be in [0, layer_height)",
    )

    # Layers must taper strictly, otherwise wrap lengths collide after flooring.
    total = int(cfg["total_layers"])
    circ = [
        math.floor(cfg["base_circumference"] * (1 - (i / total) * shrink))
        for i in range(total)
    ]
    _require(circ[-1] >= 1, "top layer circumference must be >= 1")
    for i in range(total - 1):
        _require(
            circ[i] > circ[i + 1],
            f"circumference of layer {i} ({circ[i]}) must exceed layer {i + 1} ({circ[i + 1]})",
        )

    # Classifier
    cl = dict(cfg.get("classifier", {}))
    for key in ("rock_coeff", "ice_coeff"):
        _require(_is_number(cl.get(key)) and cl[key] >= 0, f"classifier.{key} must be >= 0")
    for key in ("color_buckets", "variant_count"):
        _require(_is_int(cl.get(key)) and cl[key] >= 1, f"classifier.{key} must be >= 1")
    _require(cl["variant_count"] <= 256, "classifier.variant_count must be <= 256")
    _require(_is_int(cl.get("variant_offset")), "classifier.variant_offset must be an integer")

    # Ramps
    rp = dict(cfg.get("ramps", {}))
    _require(_is_int(rp.get("start_column")) and rp["start_column"] >= 0, "ramps.start_column must be >= 0")
    _require(_is_number(rp.get("base_stride")) and rp["base_stride"] >= 1, "ramps.base_stride must be >= 1")
    _require(_is_number(rp.get("stride_jitter")) and rp["stride_jitter"] >= 0, "ramps.stride_jitter must be >= 0")
    for key in ("width", "height"):
        _require(_is_int(rp.get(key)) and rp[key] >= 1, f"ramps.{key} must be >= 1")
    _require(_is_int(rp.get("row_offset")) and rp["row_offset"] >= 0, "ramps.row_offset must be >= 0")

    # Obstacles
    ob = dict(cfg.get("obstacles", {}))
    for key in ("tree_coeff", "rock_coeff"):
        _require(_is_number(ob.get(key)) and ob[key] >= 0, f"obstacles.{key} must be >= 0")
    _require(_is_int(ob.get("rock_sample_offset")), "obstacles.rock_sample_offset must be an integer")

    # Palette
    pal = dict(cfg.get("export", {}).get("palette", {}))
    for k in TILE_KINDS:
        _require(k in pal, f"export.palette must contain color for tile kind '{k}'")
        col = str(pal[k])
        _require(
            col.startswith("#") and len(col) in (7, 9),
            f"export.palette['{k}'] must be hex like '#RRGGBB' or '#AARRGGBB'",
        )
