# ========================
# file: mountain_engine/core/preset/model.py
# ========================
from __future__ import annotations
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping


def freeze_mapping(data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only view of ``data``; nested dicts are frozen as well."""
    return MappingProxyType(
        {k: (freeze_mapping(v) if isinstance(v, Mapping) else v) for k, v in data.items()}
    )


def _thaw(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: (_thaw(v) if isinstance(v, Mapping) else v) for k, v in data.items()}


@dataclass(frozen=True)
class MountainPreset:
    """
    Every construction constant of a mountain. Sections are read-only
    mappings, so a preset compares by value but is not hashable.
    """

    id: str
    total_layers: int
    base_circumference: int
    shrink_factor: float
    layer_height: int
    tile_size: int
    sampler: str
    classifier: Mapping[str, Any]
    ramps: Mapping[str, Any]
    obstacles: Mapping[str, Any]
    transition_margin: float
    export: Mapping[str, Any]

    __hash__ = None  # type: ignore[assignment]

    def circumference_for(self, index: int) -> int:
        """Horizontal wrap length of layer ``index`` in pixels."""
        ratio = index / self.total_layers
        return int(math.floor(self.base_circumference * (1 - ratio * self.shrink_factor)))

    def circumferences(self) -> List[int]:
        return [self.circumference_for(i) for i in range(self.total_layers)]

    @property
    def total_height(self) -> int:
        return self.total_layers * self.layer_height

    @property
    def rows_per_layer(self) -> int:
        return int(math.ceil(self.layer_height / self.tile_size))

    @property
    def palette(self) -> Dict[str, str]:
        return dict(self.export.get("palette", {}))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "total_layers": self.total_layers,
            "base_circumference": self.base_circumference,
            "shrink_factor": self.shrink_factor,
            "layer_height": self.layer_height,
            "tile_size": self.tile_size,
            "sampler": self.sampler,
            "classifier": _thaw(self.classifier),
            "ramps": _thaw(self.ramps),
            "obstacles": _thaw(self.obstacles),
            "transition_margin": self.transition_margin,
            "export": _thaw(self.export),
        }
