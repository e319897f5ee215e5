"""Centralized threshold and magic number configuration.

Aspect-ratio bands and placeholder dimensions used when classifying
submissions live here, so tuning never touches the classifier itself.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AspectThresholds:
    """Wide aspect-ratio bands (ratio = width / height), inclusive at both ends."""

    portrait_min: float = 0.4
    portrait_max: float = 0.7
    square_min: float = 0.8
    square_max: float = 1.2
    # Anything above square_max is landscape; gaps fall back to landscape too.

    def __post_init__(self) -> None:
        if not (0 < self.portrait_min <= self.portrait_max):
            raise ValueError(
                f"Invalid portrait band: [{self.portrait_min}, {self.portrait_max}]"
            )
        if not (self.portrait_max < self.square_min <= self.square_max):
            raise ValueError(
                f"Invalid square band: [{self.square_min}, {self.square_max}]"
            )


@dataclass(frozen=True)
class StrictAspectThresholds:
    """Narrow bands around the exact 16:9, 1:1 and 9:16 ratios."""

    landscape_ratio: float = 16 / 9
    square_ratio: float = 1.0
    portrait_ratio: float = 9 / 16
    tolerance: float = 0.1  # Absolute deviation from the exact ratio


@dataclass(frozen=True)
class DefaultDimensions:
    """Placeholder size for submissions stored without dimensions (16:9)."""

    width: int = 1920
    height: int = 1080


ASPECT_THRESHOLDS = AspectThresholds()
STRICT_ASPECT_THRESHOLDS = StrictAspectThresholds()
DEFAULT_DIMENSIONS = DefaultDimensions()
