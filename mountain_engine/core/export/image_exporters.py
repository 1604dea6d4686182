# ==============================================================================
# File: mountain_engine/core/export/image_exporters.py
# Purpose: PNG previews of generated layers (debugging aid, not game rendering).
# ==============================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Optional

import numpy as np
from PIL import Image

from ..constants import DEFAULT_PALETTE, ID_TO_KIND, KIND_SNOW

logger = logging.getLogger(__name__)

# Share of the way to white that the top colour bucket reaches.
_SNOW_LIGHTEN_MAX = 0.6


def _ensure_path_exists(path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _hex_to_rgb(color: str) -> tuple:
    """'#RRGGBB' or '#AARRGGBB' -> (r, g, b)."""
    s = color.lstrip("#")
    if len(s) == 8:
        s = s[2:]
    return tuple(int(s[i:i + 2], 16) for i in (0, 2, 4))


def _lut(palette: Dict[str, str], color_bucket: int, color_buckets: int) -> np.ndarray:
    """Kind id -> RGB lookup table. Snow gets lighter with the layer colour bucket."""
    lut = np.zeros((len(ID_TO_KIND), 3), dtype=np.uint8)
    for kind_id, name in ID_TO_KIND.items():
        rgb = np.array(_hex_to_rgb(palette.get(name, DEFAULT_PALETTE[name])), dtype=np.float64)
        if name == KIND_SNOW and color_buckets > 1:
            t = _SNOW_LIGHTEN_MAX * color_bucket / (color_buckets - 1)
            rgb = rgb + (255.0 - rgb) * t
        lut[kind_id] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)
    return lut


def render_layer(layer, palette: Optional[Dict[str, str]] = None, color_buckets: int = 9) -> np.ndarray:
    """(rows, cols, 3) RGB array, one pixel per tile. Row 0 is the bottom of the band."""
    lut = _lut(palette or DEFAULT_PALETTE, layer.color, color_buckets)
    # images grow downwards, the mountain grows upwards
    return lut[np.flipud(layer.kind)]


def write_layer_preview(
    path,
    layer,
    palette: Optional[Dict[str, str]] = None,
    scale: int = 4,
    color_buckets: int = 9,
) -> None:
    """Draws one layer and saves it as PNG."""
    _ensure_path_exists(path)
    rgb = render_layer(layer, palette, color_buckets)
    img = Image.fromarray(rgb)
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    img.save(path)
    logger.debug("Layer %d preview saved to %s", layer.index, path)


def write_mountain_preview(path, model, scale: int = 4) -> None:
    """
    Stacks every layer into one picture, peak on top. Narrower upper layers
    are centred so the taper of the mountain is visible.
    """
    preset = model.preset
    layers = model.get_layers()
    palette = preset.palette
    buckets = int(preset.classifier["color_buckets"])

    width = max(layer.width for layer in layers)
    height = sum(layer.height for layer in layers)
    sky = np.array(_hex_to_rgb("#1B2A41"), dtype=np.uint8)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[...] = sky

    y = height
    for layer in layers:
        rgb = render_layer(layer, palette, buckets)
        y -= layer.height
        x = (width - layer.width) // 2
        canvas[y:y + layer.height, x:x + layer.width] = rgb

    _ensure_path_exists(path)
    img = Image.fromarray(canvas)
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    img.save(path)
    logger.info("Mountain preview saved to %s (%dx%d tiles)", path, width, height)


__all__ = ["render_layer", "write_layer_preview", "write_mountain_preview"]
