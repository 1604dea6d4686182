# ==============================================================================
# File: mountain_engine/core/export/__init__.py
# ==============================================================================
from __future__ import annotations

from .image_exporters import render_layer, write_layer_preview, write_mountain_preview

__all__ = ["render_layer", "write_layer_preview", "write_mountain_preview"]
