# ==============================================================================
# File: tests/test_features.py
# Purpose: ramp and obstacle brushes.
# ==============================================================================
import unittest

import numpy as np

from _helpers import constant_sampler

from mountain_engine.algorithms.terrain.classifier import classify_layer
from mountain_engine.core.constants import TileKind
from mountain_engine.core.preset import load_preset
from mountain_engine.core.utils.layers import grid_dims, make_empty_grids
from mountain_engine.core.utils.rng import make_sampler
from mountain_engine.world.features import FEATURE_PASSES, ObstacleBrush, RampBrush


class TestRampBrush(unittest.TestCase):
    def setUp(self):
        self.preset = load_preset()

    def test_fixed_stride_without_jitter(self):
        grids = make_empty_grids(63, 7)
        written = RampBrush(grids, self.preset, constant_sampler(0.0), 0).apply()
        kind = grids["kind"]

        # stops at columns 10 and 60, rows 1-2
        self.assertTrue(np.all(kind[1:3, 10:13] == TileKind.RAMP))
        self.assertTrue(np.all(kind[1:3, 60:63] == TileKind.RAMP))
        self.assertEqual(int(np.sum(kind == TileKind.RAMP)), 12)
        self.assertEqual(written, 12)

    def test_patch_is_clipped_at_grid_edge(self):
        grids = make_empty_grids(62, 7)
        written = RampBrush(grids, self.preset, constant_sampler(0.0), 0).apply()
        self.assertEqual(written, 10)
        self.assertFalse(np.any(grids["kind"][:, :10] == TileKind.RAMP))

    def test_row_stays_inside_band(self):
        grids = make_empty_grids(63, 7)
        RampBrush(grids, self.preset, constant_sampler(0.999), 0).apply()
        rows = np.nonzero(np.any(grids["kind"] == TileKind.RAMP, axis=1))[0]
        self.assertEqual(list(rows), [4, 5])

    def test_tiny_grid_does_not_wrap_rows(self):
        grids = make_empty_grids(20, 1)
        RampBrush(grids, self.preset, constant_sampler(0.5), 0).apply()
        self.assertTrue(np.all(grids["kind"][0, 10:13] == TileKind.RAMP))

    def test_narrow_grid_gets_no_ramp(self):
        grids = make_empty_grids(10, 7)
        self.assertEqual(RampBrush(grids, self.preset, constant_sampler(0.0), 0).apply(), 0)

    def test_overwrites_classified_tiles(self):
        grids = make_empty_grids(63, 7)
        grids["kind"][1, 10] = TileKind.ROCK
        grids["kind"][2, 11] = TileKind.ICE
        RampBrush(grids, self.preset, constant_sampler(0.0), 0).apply()
        self.assertEqual(grids["kind"][1, 10], TileKind.RAMP)
        self.assertEqual(grids["kind"][2, 11], TileKind.RAMP)


class TestObstacleBrush(unittest.TestCase):
    def setUp(self):
        self.preset = load_preset()

    def test_lands_only_on_snow(self):
        # every sample points at (0, 0)
        for kind in (TileKind.RAMP, TileKind.ICE, TileKind.ROCK):
            grids = make_empty_grids(63, 7)
            grids["kind"][0, 0] = kind
            written = ObstacleBrush(grids, self.preset, constant_sampler(0.0), 5).apply()
            self.assertEqual(written, 0)
            self.assertEqual(grids["kind"][0, 0], kind)

    def test_first_unit_wins(self):
        grids = make_empty_grids(63, 7)
        written = ObstacleBrush(grids, self.preset, constant_sampler(0.0), 5).apply()
        self.assertEqual(written, 1)
        self.assertEqual(grids["kind"][0, 0], TileKind.TREE)

    def test_counts_follow_layer(self):
        seen = {}

        def spy(x, y, layer):
            seen.setdefault(layer, set()).add(x)
            return 0.0

        for layer in (0, 9):
            ObstacleBrush(make_empty_grids(63, 7), self.preset, spy, layer).apply()

        trees_bottom = {x for x in seen[0] if x < 1000}
        rocks_bottom = {x for x in seen[0] if x >= 1000}
        trees_top = {x for x in seen[9] if x < 1000}
        rocks_top = {x for x in seen[9] if x >= 1000}
        self.assertEqual(len(trees_bottom), 50)
        self.assertEqual(len(rocks_bottom), 0)
        self.assertEqual(len(trees_top), 5)
        self.assertEqual(len(rocks_top), 27)

    def test_never_clobbers_earlier_passes(self):
        preset = self.preset
        for seed in ("test", "alpine", "black-run"):
            sample = make_sampler(seed)
            for layer in range(preset.total_layers):
                cols, rows = grid_dims(preset.circumference_for(layer), preset.layer_height, preset.tile_size)
                grids = make_empty_grids(cols, rows)
                classify_layer(grids, layer, sample, preset)
                RampBrush(grids, preset, sample, layer).apply()
                before = grids["kind"].copy()

                ObstacleBrush(grids, preset, sample, layer).apply()
                after = grids["kind"]

                changed = before != after
                self.assertTrue(np.all(before[changed] == TileKind.SNOW))
                self.assertTrue(np.all(np.isin(after[changed], [int(TileKind.TREE), int(TileKind.OBSTACLE)])))

    def test_pass_order(self):
        self.assertEqual(FEATURE_PASSES, (RampBrush, ObstacleBrush))


if __name__ == "__main__":
    unittest.main()
