# mountain_engine/core/utils/metrics.py
from __future__ import annotations
from typing import Any, Dict

import numpy as np

from .. import constants as const


def count_kinds(kind_grid: np.ndarray) -> Dict[str, int]:
    """Tile count per kind name, zero for kinds that do not occur."""
    ids, counts = np.unique(kind_grid, return_counts=True)
    found = {int(i): int(c) for i, c in zip(ids, counts)}
    return {name: found.get(int(kid), 0) for name, kid in const.KIND_TO_ID.items()}


def compute_layer_metrics(layer) -> Dict[str, Any]:
    """
    Counts tiles per kind for one MountainLayer plus a couple of shares used in logs.
    """
    counts = count_kinds(layer.kind)
    total = int(layer.kind.size)
    if total == 0:
        return {"index": layer.index, "tiles": 0, "snow_pct": 0.0, "hazard_pct": 0.0, **counts}

    hazard = sum(counts[const.kind_name(k)] for k in const.HAZARD_KINDS)
    return {
        "index": layer.index,
        "tiles": total,
        "snow_pct": counts[const.KIND_SNOW] / total,
        "hazard_pct": hazard / total,
        **counts,
    }
