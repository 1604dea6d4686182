# mountain_engine/world/features/ramps.py
from __future__ import annotations
import logging
import math

from ...core.constants import TileKind
from .base_feature import FeatureBrush

logger = logging.getLogger(__name__)


class RampBrush(FeatureBrush):
    def apply(self) -> int:
        """
        Walks the columns with a seed-jittered stride and stamps a small ramp
        patch at every stop. Overwrites whatever the classifier put there.
        The patch is clipped at the grid edge, it never wraps.
        """
        cfg = self.preset.ramps
        layer = self.layer_index
        patch_w = int(cfg["width"])
        patch_h = int(cfg["height"])
        row_offset = int(cfg["row_offset"])
        row_span = max(self.rows - patch_h - row_offset, 1)

        written = 0
        ramps = 0
        col = int(cfg["start_column"])
        while col < self.cols:
            row = int(math.floor(self.sample(col, 1, layer) * row_span)) + row_offset
            row = min(max(row, 0), self.rows - 1)

            patch = self.kind_grid[row:row + patch_h, col:col + patch_w]
            patch[...] = int(TileKind.RAMP)
            written += patch.size
            ramps += 1

            col += int(math.floor(cfg["base_stride"] + self.sample(col, 0, layer) * cfg["stride_jitter"]))

        logger.debug("Layer %d: %d ramps, %d tiles", layer, ramps, written)
        return written
