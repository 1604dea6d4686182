# mountain_engine/world/features/obstacles.py
from __future__ import annotations
import logging
import math

from ...core.constants import TileKind
from .base_feature import FeatureBrush

logger = logging.getLogger(__name__)


class ObstacleBrush(FeatureBrush):
    def apply(self) -> int:
        """
        Scatters trees (dense at the foot of the mountain) and rock obstacles
        (dense near the peak). A unit lands only on plain snow, so ramps, ice,
        rock and earlier obstacles are never replaced.
        """
        cfg = self.preset.obstacles
        layer = self.layer_index

        tree_count = int(math.floor((self.preset.total_layers - layer) * cfg["tree_coeff"]))
        trees = self._scatter(tree_count, 0, TileKind.TREE)

        rock_count = int(math.floor(layer * cfg["rock_coeff"]))
        rocks = self._scatter(rock_count, int(cfg["rock_sample_offset"]), TileKind.OBSTACLE)

        logger.debug(
            "Layer %d: placed %d/%d trees, %d/%d rocks",
            layer, trees, tree_count, rocks, rock_count,
        )
        return trees + rocks

    def _scatter(self, count: int, offset: int, kind: TileKind) -> int:
        placed = 0
        for i in range(count):
            col = int(math.floor(self.sample(i + offset, 0, self.layer_index) * self.cols))
            row = int(math.floor(self.sample(i + offset, 1, self.layer_index) * self.rows))
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                continue
            if int(self.kind_grid[row, col]) == TileKind.SNOW:
                self.kind_grid[row, col] = int(kind)
                placed += 1
        return placed
