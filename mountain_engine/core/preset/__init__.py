# ========================
# file: mountain_engine/core/preset/__init__.py
# ========================
from .model import MountainPreset
from .loader import load_preset, deep_merge
from .defaults import DEFAULT_PRESET
from .errors import PresetError, ValidationError, NotFoundError

__all__ = [
    "MountainPreset",
    "load_preset",
    "deep_merge",
    "DEFAULT_PRESET",
    "PresetError",
    "ValidationError",
    "NotFoundError",
]
