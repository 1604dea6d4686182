from .base_feature import FeatureBrush
from .ramps import RampBrush
from .obstacles import ObstacleBrush

# Brushes in the order they are painted over a classified layer.
FEATURE_PASSES = (RampBrush, ObstacleBrush)

__all__ = ["FeatureBrush", "RampBrush", "ObstacleBrush", "FEATURE_PASSES"]
