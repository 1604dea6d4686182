# ==============================================================================
# File: mountain_engine/core/constants.py
# Purpose: tile kinds of the mountain grid, their ids and the preview palette.
# ==============================================================================
from __future__ import annotations
from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


# =======================================================================
# TILE KINDS
# =======================================================================

class TileKind(IntEnum):
    """Closed set of terrain kinds. The value is the id stored in the grid."""

    SNOW = 0
    ICE = 1
    ROCK = 2
    TREE = 3
    RAMP = 4
    OBSTACLE = 5


KIND_SNOW = "snow"
KIND_ICE = "ice"
KIND_ROCK = "rock"
KIND_TREE = "tree"
KIND_RAMP = "ramp"
KIND_OBSTACLE = "obstacle"

# Single source of truth for name <-> id.
KIND_TO_ID: Dict[str, int] = {
    KIND_SNOW: TileKind.SNOW,
    KIND_ICE: TileKind.ICE,
    KIND_ROCK: TileKind.ROCK,
    KIND_TREE: TileKind.TREE,
    KIND_RAMP: TileKind.RAMP,
    KIND_OBSTACLE: TileKind.OBSTACLE,
}
ID_TO_KIND: Dict[int, str] = {int(v): k for k, v in KIND_TO_ID.items()}

TILE_KINDS: Tuple[str, ...] = tuple(KIND_TO_ID.keys())

# Kinds a sled can crash into.
HAZARD_KINDS: Tuple[TileKind, ...] = (TileKind.ROCK, TileKind.TREE, TileKind.OBSTACLE)

# =======================================================================
# ARRAYS
# =======================================================================
KIND_DTYPE = np.uint8
VARIANT_DTYPE = np.uint8


def kind_name(kind_or_id) -> str:
    """Returns the string name for a TileKind, raw id or numpy integer."""
    return ID_TO_KIND[int(kind_or_id)]


# =======================================================================
# PALETTE (preview export)
# =======================================================================
DEFAULT_PALETTE: Dict[str, str] = {
    KIND_SNOW: "#D8E2EC",
    KIND_ICE: "#9FD3EE",
    KIND_ROCK: "#7D8187",
    KIND_TREE: "#2F5D3A",
    KIND_RAMP: "#D9A441",
    KIND_OBSTACLE: "#4E4640",
}
