# mountain_engine/world/features/base_feature.py
from __future__ import annotations
from typing import Dict

import numpy as np

from ...core.preset.model import MountainPreset
from ...core.utils.rng import Sampler


# Base class for the feature "brushes" painted over a classified layer.
class FeatureBrush:
    def __init__(
        self,
        grids: Dict[str, np.ndarray],
        preset: MountainPreset,
        sample: Sampler,
        layer_index: int,
    ):
        self.grids = grids
        self.preset = preset
        self.sample = sample
        self.layer_index = layer_index
        self.kind_grid = grids["kind"]
        self.rows, self.cols = self.kind_grid.shape

    def apply(self) -> int:
        """Paints the feature and returns the number of tiles written."""
        raise NotImplementedError
