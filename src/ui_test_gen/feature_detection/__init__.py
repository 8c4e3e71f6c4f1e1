"""Feature detection exports."""

from .feature_flags import FeatureFlags, column_has_values, detect_features

__all__ = ["FeatureFlags", "column_has_values", "detect_features"]
