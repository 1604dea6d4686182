# File: mountain_engine/generators/layer_builder.py
from __future__ import annotations
import logging
import time

from ..algorithms.terrain.classifier import classify_layer, layer_color
from ..core.preset.model import MountainPreset
from ..core.types import HeightRange, MountainLayer
from ..core.utils.layers import freeze, grid_dims, make_empty_grids
from ..core.utils.rng import Sampler
from ..world.features import FEATURE_PASSES

logger = logging.getLogger(__name__)


class LayerBuilder:
    """Classifies a layer grid, paints ramps then obstacles, and freezes it."""

    def __init__(self, preset: MountainPreset, sample: Sampler):
        self.preset = preset
        self.sample = sample

    def build(self, index: int, circumference: int, height_range: HeightRange) -> MountainLayer:
        t0 = time.perf_counter()
        cols, rows = grid_dims(circumference, height_range.span, self.preset.tile_size)

        grids = make_empty_grids(cols, rows)

        # 1. Base kinds and sprite variants
        classify_layer(grids, index, self.sample, self.preset)

        # 2. Features, in a fixed order: later brushes see earlier ones
        for brush_cls in FEATURE_PASSES:
            brush_cls(grids, self.preset, self.sample, index).apply()

        freeze(grids)
        layer = MountainLayer(
            index=index,
            circumference=circumference,
            height_range=height_range,
            tile_size=self.preset.tile_size,
            color=layer_color(index, self.preset),
            kind=grids["kind"],
            variant=grids["variant"],
        )
        logger.debug(
            "Layer %d built: %dx%d tiles, circumference %d px, %.1f ms",
            index, cols, rows, circumference, (time.perf_counter() - t0) * 1000,
        )
        return layer
