# ==============================================================================
# File: tests/test_image_exporters.py
# Purpose: PNG previews of layers and of the whole mountain.
# ==============================================================================
import os
import tempfile
import unittest

import numpy as np
from PIL import Image

from _helpers import cached_model

from mountain_engine.core.constants import DEFAULT_PALETTE, TileKind
from mountain_engine.core.export import render_layer, write_layer_preview, write_mountain_preview
from mountain_engine.core.types import HeightRange, MountainLayer


def _flat_layer(kind: TileKind, color: int, cols: int = 4, rows: int = 3) -> MountainLayer:
    return MountainLayer(
        index=0,
        circumference=cols * 32,
        height_range=HeightRange(0, rows * 32),
        tile_size=32,
        color=color,
        kind=np.full((rows, cols), int(kind), dtype=np.uint8),
        variant=np.zeros((rows, cols), dtype=np.uint8),
    )


class TestRenderLayer(unittest.TestCase):
    def test_shape_and_palette(self):
        rgb = render_layer(_flat_layer(TileKind.RAMP, 0), DEFAULT_PALETTE)
        self.assertEqual(rgb.shape, (3, 4, 3))
        self.assertEqual(tuple(rgb[0, 0]), (0xD9, 0xA4, 0x41))

    def test_snow_gets_lighter_higher_up(self):
        low = render_layer(_flat_layer(TileKind.SNOW, 0))
        high = render_layer(_flat_layer(TileKind.SNOW, 8))
        self.assertGreater(int(high.sum()), int(low.sum()))

    def test_bottom_row_is_drawn_last(self):
        layer = _flat_layer(TileKind.SNOW, 0)
        kind = layer.kind.copy()
        kind[0, :] = TileKind.TREE
        layer = MountainLayer(
            index=0, circumference=128, height_range=HeightRange(0, 96), tile_size=32,
            color=0, kind=kind, variant=layer.variant,
        )
        rgb = render_layer(layer, DEFAULT_PALETTE)
        self.assertEqual(tuple(rgb[-1, 0]), (0x2F, 0x5D, 0x3A))


class TestWritePreviews(unittest.TestCase):
    def test_mountain_preview(self):
        model = cached_model("test")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "mountain.png")
            write_mountain_preview(path, model, scale=2)
            with Image.open(path) as img:
                self.assertEqual(img.size, (63 * 2, 70 * 2))

    def test_layer_preview(self):
        layer = cached_model("test").get_layer(9)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "layer.png")
            write_layer_preview(path, layer, scale=1)
            with Image.open(path) as img:
                self.assertEqual(img.size, (layer.width, layer.height))


if __name__ == "__main__":
    unittest.main()
