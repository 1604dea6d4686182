# ==============================================================================
# File: mountain_engine/world/mountain.py
# Purpose: the whole mountain of one run and the spatial queries on it.
# ==============================================================================
from __future__ import annotations
import logging
import math
import numbers
import time
from typing import Any, Dict, List, Optional, Tuple

from ..core.preset import MountainPreset, load_preset
from ..core.types import HeightRange, MountainLayer, Position, TerrainTile
from ..core.utils.metrics import compute_layer_metrics
from ..core.utils.rng import make_sampler
from ..generators.layer_builder import LayerBuilder

logger = logging.getLogger(__name__)


class MountainModel:
    """
    Stack of wrapping layers built once from a seed, read-only afterwards.

    Layer 0 is the widest band at the foot of the mountain. Queries never
    raise for out-of-range input: they answer ``None`` or hand the input back.
    """

    def __init__(self, seed: str, preset: Optional[MountainPreset] = None):
        if not isinstance(seed, str):
            raise TypeError(f"seed must be str, got {type(seed).__name__}")
        self._seed = seed
        self._preset = preset if preset is not None else load_preset()

        t0 = time.perf_counter()
        builder = LayerBuilder(self._preset, make_sampler(seed, self._preset.sampler))
        layers: List[MountainLayer] = []
        height = self._preset.layer_height
        for i in range(self._preset.total_layers):
            layers.append(
                builder.build(
                    i,
                    self._preset.circumference_for(i),
                    HeightRange(min=i * height, max=(i + 1) * height),
                )
            )
        self._layers: Tuple[MountainLayer, ...] = tuple(layers)

        logger.info(
            "Mountain '%s' generated: %d layers in %.1f ms",
            seed, len(self._layers), (time.perf_counter() - t0) * 1000,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def seed(self) -> str:
        return self._seed

    @property
    def preset(self) -> MountainPreset:
        return self._preset

    @property
    def total_height(self) -> int:
        return self._layers[-1].height_range.max

    # ------------------------------------------------------------------
    # Layer access
    # ------------------------------------------------------------------
    def get_layers(self) -> Tuple[MountainLayer, ...]:
        return self._layers

    def get_layer(self, index: int) -> Optional[MountainLayer]:
        if not isinstance(index, numbers.Integral) or not (0 <= index < len(self._layers)):
            return None
        return self._layers[int(index)]

    def get_layer_index_for_y(self, y: float) -> int:
        """
        Index of the layer whose band contains world ``y``. Values below the
        mountain clamp to 0 and values above it to the top layer, since a
        jumping sled can briefly leave the modeled range.
        """
        if not y >= self._layers[0].height_range.min:
            return 0
        for layer in self._layers:
            if layer.height_range.contains(y):
                return layer.index
        return len(self._layers) - 1

    def get_layer_for_y(self, y: float) -> MountainLayer:
        return self._layers[self.get_layer_index_for_y(y)]

    # ------------------------------------------------------------------
    # Tile lookup
    # ------------------------------------------------------------------
    def get_tile_at(self, x: float, y: float, layer_index: int) -> Optional[TerrainTile]:
        """
        Tile under layer-local pixel ``(x, y)``. Columns wrap around the
        layer, rows do not: a row outside the grid is open air (``None``).
        The wrap period is ``layer.wrap_period`` (``width * tile_size``), not
        the circumference, unless the circumference is a whole number of tiles.
        """
        layer = self.get_layer(layer_index)
        if layer is None:
            return None
        if not (math.isfinite(x) and math.isfinite(y)):
            return None

        tile_x = math.floor(x / layer.tile_size)
        tile_y = math.floor(y / layer.tile_size)
        if not (0 <= tile_y < layer.height):
            return None

        # floor modulo: negative x wraps in from the right edge
        col = tile_x % layer.width
        return layer.tile(col, tile_y)

    def get_tile_at_world(self, x: float, y: float) -> Optional[TerrainTile]:
        """Tile under world-space ``(x, y)``; ``None`` above or below the mountain."""
        if not (0 <= y < self.total_height):
            return None
        layer = self.get_layer_for_y(y)
        return self.get_tile_at(x, y - layer.height_range.min, layer.index)

    def wrap_x(self, x: float, layer_index: int) -> float:
        """Pixel ``x`` folded into ``[0, wrap_period)`` of the layer, the span
        ``get_tile_at`` repeats over."""
        layer = self.get_layer(layer_index)
        if layer is None or not math.isfinite(x):
            return x
        return x % layer.wrap_period

    # ------------------------------------------------------------------
    # Layer transitions
    # ------------------------------------------------------------------
    def scale_x_between_layers(self, x: float, source_index: int, target_index: int) -> float:
        """Keeps the angular position around the mountain when the band width changes."""
        source = self.get_layer(source_index)
        target = self.get_layer(target_index)
        if source is None or target is None:
            return x
        return x * (target.circumference / source.circumference)

    def transition_to_layer(
        self, current_x: float, current_y: float, current_layer: int, new_layer: int
    ) -> Position:
        """
        Position of a sled that crosses from ``current_layer`` into ``new_layer``.

        Climbing lands ``transition_margin`` above the new band's floor,
        descending lands the same margin below its ceiling, so the crossing
        does not fire again on the next tick. Staying on the same layer is
        handled like descending.
        """
        source = self.get_layer(current_layer)
        target = self.get_layer(new_layer)
        if source is None or target is None:
            return Position(current_x, current_y)

        new_x = self.scale_x_between_layers(current_x, current_layer, new_layer)
        margin = self._preset.transition_margin
        if new_layer > current_layer:
            new_y = target.height_range.min + margin
        else:
            new_y = target.height_range.max - margin

        logger.debug(
            "Transition %d -> %d: (%.1f, %.1f) -> (%.1f, %.1f)",
            current_layer, new_layer, current_x, current_y, new_x, new_y,
        )
        return Position(new_x, new_y)

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------
    def stats(self) -> List[Dict[str, Any]]:
        return [compute_layer_metrics(layer) for layer in self._layers]
