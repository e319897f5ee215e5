"""Shared constants and helpers used across the toolkit."""

from .thresholds import (
    AspectThresholds,
    StrictAspectThresholds,
    DefaultDimensions,
    ASPECT_THRESHOLDS,
    STRICT_ASPECT_THRESHOLDS,
    DEFAULT_DIMENSIONS,
)

__all__ = [
    "AspectThresholds",
    "StrictAspectThresholds",
    "DefaultDimensions",
    "ASPECT_THRESHOLDS",
    "STRICT_ASPECT_THRESHOLDS",
    "DEFAULT_DIMENSIONS",
]
