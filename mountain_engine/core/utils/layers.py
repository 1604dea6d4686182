# mountain_engine/core/utils/layers.py
from __future__ import annotations
import math
from typing import Dict, Tuple

import numpy as np

from .. import constants as const


def grid_dims(circumference: int, layer_height: int, tile_size: int) -> Tuple[int, int]:
    """(cols, rows) of a layer grid at ``tile_size`` resolution."""
    cols = int(math.ceil(circumference / tile_size))
    rows = int(math.ceil(layer_height / tile_size))
    return cols, rows


def make_empty_grids(cols: int, rows: int) -> Dict[str, np.ndarray]:
    """
    Creates the per-layer grid container. Every tile starts as snow, variant 0.
    """
    return {
        "kind": np.full((rows, cols), int(const.TileKind.SNOW), dtype=const.KIND_DTYPE),
        "variant": np.zeros((rows, cols), dtype=const.VARIANT_DTYPE),
    }


def freeze(grids: Dict[str, np.ndarray]) -> Dict[str, np.ndarray]:
    """Marks every grid read-only."""
    for arr in grids.values():
        arr.setflags(write=False)
    return grids
