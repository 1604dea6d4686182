# ========================
# file: mountain_engine/core/preset/errors.py
# ========================
class PresetError(Exception):
    """Base error for preset system."""


class ValidationError(PresetError):
    """Raised when a preset fails validation."""


class NotFoundError(PresetError):
    """Raised when a preset path cannot be resolved."""
