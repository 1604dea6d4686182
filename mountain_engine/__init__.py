"""Seed-driven procedural mountain for a 2D sledding game."""
from .core.constants import TileKind
from .core.preset import MountainPreset, load_preset
from .core.types import HeightRange, MountainLayer, Position, TerrainTile
from .world.mountain import MountainModel

__all__ = [
    "TileKind",
    "MountainPreset",
    "load_preset",
    "HeightRange",
    "MountainLayer",
    "Position",
    "TerrainTile",
    "MountainModel",
]
