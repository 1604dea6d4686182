# ==============================================================================
# File: mountain_engine/algorithms/terrain/classifier.py
# Purpose: decides the base kind and cosmetic indices of every tile.
# ==============================================================================
from __future__ import annotations
import math
from typing import Dict

import numpy as np

from ...core.constants import TileKind
from ...core.preset.model import MountainPreset
from ...core.types import TerrainTile
from ...core.utils.rng import Sampler


def layer_color(layer: int, preset: MountainPreset) -> int:
    """Snow shade bucket. Depends only on the layer, lighter towards the peak."""
    buckets = int(preset.classifier["color_buckets"])
    return int(math.floor((layer / preset.total_layers) * buckets))


def classify_kind(r: float, layer: int, preset: MountainPreset) -> TileKind:
    """Rock thins out and ice spreads as the layer index grows."""
    cfg = preset.classifier
    rock_chance = (preset.total_layers - layer) * cfg["rock_coeff"]
    ice_chance = layer * cfg["ice_coeff"]
    if r < rock_chance:
        return TileKind.ROCK
    if r < rock_chance + ice_chance:
        return TileKind.ICE
    return TileKind.SNOW


def tile_variant(col: int, row: int, layer: int, sample: Sampler, preset: MountainPreset) -> int:
    cfg = preset.classifier
    offset = cfg["variant_offset"]
    return int(math.floor(sample(col + offset, row + offset, layer) * cfg["variant_count"]))


def classify_tile(
    col: int, row: int, layer: int, sample: Sampler, preset: MountainPreset
) -> TerrainTile:
    return TerrainTile(
        kind=classify_kind(sample(col, row, layer), layer, preset),
        altitude=layer * preset.layer_height + row * preset.tile_size,
        color=layer_color(layer, preset),
        variant=tile_variant(col, row, layer, sample, preset),
    )


def classify_layer(
    grids: Dict[str, np.ndarray], layer: int, sample: Sampler, preset: MountainPreset
) -> None:
    """Fills the kind/variant grids of one layer in place."""
    kind_grid = grids["kind"]
    variant_grid = grids["variant"]
    rows, cols = kind_grid.shape
    for row in range(rows):
        for col in range(cols):
            kind_grid[row, col] = int(classify_kind(sample(col, row, layer), layer, preset))
            variant_grid[row, col] = tile_variant(col, row, layer, sample, preset)
