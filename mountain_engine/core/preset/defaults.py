# ========================
# file: mountain_engine/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..constants import DEFAULT_PALETTE

DEFAULT_PRESET: Dict[str, Any] = {
    "id": "mountain/default",
    # geometry
    "total_layers": 10,
    "base_circumference": 2000,
    "shrink_factor": 0.7,
    "layer_height": 200,
    "tile_size": 32,
    "sampler": "sine",
    # classifier
    "classifier": {
        "rock_coeff": 0.02,
        "ice_coeff": 0.05,
        "color_buckets": 9,
        "variant_count": 3,
        "variant_offset": 100,
    },
    # feature brushes
    "ramps": {
        "start_column": 10,
        "base_stride": 50,
        "stride_jitter": 50,
        "width": 3,
        "height": 2,
        "row_offset": 1,
    },
    "obstacles": {
        "tree_coeff": 5,
        "rock_coeff": 3,
        "rock_sample_offset": 1000,
    },
    # queries
    "transition_margin": 10,
    "export": {"palette": dict(DEFAULT_PALETTE)},
}
