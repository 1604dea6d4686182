# ==============================================================================
# File: tests/test_classifier.py
# Purpose: base tile classification.
# ==============================================================================
import unittest

import numpy as np

from _helpers import constant_sampler

from mountain_engine.algorithms.terrain.classifier import (
    classify_kind,
    classify_layer,
    classify_tile,
    layer_color,
)
from mountain_engine.core.constants import TileKind
from mountain_engine.core.preset import load_preset
from mountain_engine.core.utils.layers import grid_dims, make_empty_grids
from mountain_engine.core.utils.rng import make_sampler


class TestClassifyKind(unittest.TestCase):
    def setUp(self):
        self.preset = load_preset()

    def test_bottom_layer_has_rock_and_no_ice(self):
        # layer 0: rock chance 0.2, ice chance 0
        self.assertEqual(classify_kind(0.1, 0, self.preset), TileKind.ROCK)
        self.assertEqual(classify_kind(0.19, 0, self.preset), TileKind.ROCK)
        self.assertEqual(classify_kind(0.21, 0, self.preset), TileKind.SNOW)

    def test_top_layer_is_mostly_ice(self):
        # layer 9: rock chance 0.02, ice chance 0.45
        self.assertEqual(classify_kind(0.01, 9, self.preset), TileKind.ROCK)
        self.assertEqual(classify_kind(0.3, 9, self.preset), TileKind.ICE)
        self.assertEqual(classify_kind(0.6, 9, self.preset), TileKind.SNOW)

    def test_thresholds_are_cumulative(self):
        # layer 5: rock [0, 0.1), ice [0.1, 0.35)
        self.assertEqual(classify_kind(0.05, 5, self.preset), TileKind.ROCK)
        self.assertEqual(classify_kind(0.2, 5, self.preset), TileKind.ICE)
        self.assertEqual(classify_kind(0.4, 5, self.preset), TileKind.SNOW)


class TestColorAndTile(unittest.TestCase):
    def setUp(self):
        self.preset = load_preset()

    def test_color_bucket_by_layer(self):
        self.assertEqual(layer_color(0, self.preset), 0)
        self.assertEqual(layer_color(5, self.preset), 4)
        self.assertEqual(layer_color(9, self.preset), 8)
        colors = [layer_color(i, self.preset) for i in range(10)]
        self.assertEqual(colors, sorted(colors))

    def test_classify_tile(self):
        tile = classify_tile(4, 3, 2, constant_sampler(0.5), self.preset)
        self.assertEqual(tile.kind, TileKind.SNOW)
        self.assertEqual(tile.altitude, 2 * 200 + 3 * 32)
        self.assertEqual(tile.color, layer_color(2, self.preset))
        self.assertEqual(tile.variant, 1)
        self.assertEqual(tile.name, "snow")

    def test_variant_uses_offset_sample(self):
        seen = []

        def spy(x, y, layer):
            seen.append((x, y, layer))
            return 0.0

        classify_tile(4, 3, 2, spy, self.preset)
        self.assertIn((4, 3, 2), seen)
        self.assertIn((104, 103, 2), seen)


class TestClassifyLayer(unittest.TestCase):
    def test_fills_every_cell(self):
        preset = load_preset()
        cols, rows = grid_dims(2000, 200, 32)
        self.assertEqual((cols, rows), (63, 7))
        grids = make_empty_grids(cols, rows)
        sample = make_sampler("test")
        classify_layer(grids, 3, sample, preset)

        for row in range(rows):
            for col in range(cols):
                expected = classify_tile(col, row, 3, sample, preset)
                self.assertEqual(grids["kind"][row, col], expected.kind)
                self.assertEqual(grids["variant"][row, col], expected.variant)
        self.assertTrue(np.all(grids["variant"] < 3))


if __name__ == "__main__":
    unittest.main()
