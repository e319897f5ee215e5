"""
Module: playlist.classification

Purpose:
    Map pixel dimensions to a display-shape category.

    The default classifier uses deliberately wide bands: uploaded photos
    rarely match 16:9, 1:1 or 9:16 exactly, and narrow bands would starve
    the rotation down to the few perfectly shaped images. Anything that
    fits no band falls back to landscape so no submission leaves the
    rotation.

    | ratio (w/h)     | category  |
    |-----------------|-----------|
    | 0.4 <= r <= 0.7 | portrait  |
    | 0.8 <= r <= 1.2 | square    |
    | r > 1.2         | landscape |
    | otherwise       | landscape |

    The strict classifier keeps the legacy +/-0.1 detection around the
    exact ratios and reports everything else as UNCLASSIFIABLE.

Key Functions:
    - classify_aspect(): Classify with the default wide bands
    - get_classifier(): Classifier for a PlaylistConfig.classifier_mode

Key Classes:
    - AspectClassifier: Wide-band classifier
    - StrictAspectClassifier: Exact-ratio classifier

Dependencies:
    - event_slideshow.common.thresholds: Band definitions
    - event_slideshow.core.models: ShapeCategory

Used By:
    - playlist.partition: Bucket assignment
"""

from __future__ import annotations

from typing import Optional

from event_slideshow.common.thresholds import (
    ASPECT_THRESHOLDS,
    STRICT_ASPECT_THRESHOLDS,
    DEFAULT_DIMENSIONS,
    AspectThresholds,
    StrictAspectThresholds,
)
from event_slideshow.core.models import ShapeCategory


def _normalise(width: Optional[float], height: Optional[float]) -> tuple[float, float]:
    """Replace missing or non-positive dimensions with the placeholder size."""
    if not width or width <= 0:
        width = DEFAULT_DIMENSIONS.width
    if not height or height <= 0:
        height = DEFAULT_DIMENSIONS.height
    return width, height


class AspectClassifier:
    """
    Wide-band aspect classifier. Never raises, never rejects.

    Example:
        >>> AspectClassifier().classify(1080, 1920)
        <ShapeCategory.PORTRAIT: 'portrait'>
    """

    def __init__(self, thresholds: AspectThresholds = ASPECT_THRESHOLDS):
        self.thresholds = thresholds

    def classify_ratio(self, ratio: float) -> ShapeCategory:
        t = self.thresholds
        if t.portrait_min <= ratio <= t.portrait_max:
            return ShapeCategory.PORTRAIT
        if t.square_min <= ratio <= t.square_max:
            return ShapeCategory.SQUARE
        return ShapeCategory.LANDSCAPE

    def classify(self, width: Optional[float], height: Optional[float]) -> ShapeCategory:
        w, h = _normalise(width, height)
        return self.classify_ratio(w / h)


class StrictAspectClassifier(AspectClassifier):
    """Exact-ratio classifier; images off the three nominal shapes are UNCLASSIFIABLE."""

    def __init__(self, thresholds: StrictAspectThresholds = STRICT_ASPECT_THRESHOLDS):
        self.thresholds = thresholds

    def classify_ratio(self, ratio: float) -> ShapeCategory:
        t = self.thresholds
        if abs(ratio - t.landscape_ratio) < t.tolerance:
            return ShapeCategory.LANDSCAPE
        if abs(ratio - t.square_ratio) < t.tolerance:
            return ShapeCategory.SQUARE
        if abs(ratio - t.portrait_ratio) < t.tolerance:
            return ShapeCategory.PORTRAIT
        return ShapeCategory.UNCLASSIFIABLE


_DEFAULT_CLASSIFIER = AspectClassifier()


def classify_aspect(width: Optional[float], height: Optional[float]) -> ShapeCategory:
    """Classify dimensions with the default wide bands."""
    return _DEFAULT_CLASSIFIER.classify(width, height)


def get_classifier(mode: str = "wide") -> AspectClassifier:
    """
    Get the classifier for a configuration mode.

    Args:
        mode: "wide" (default) or "strict"

    Raises:
        ValueError: For unknown modes
    """
    if mode == "wide":
        return _DEFAULT_CLASSIFIER
    if mode == "strict":
        return StrictAspectClassifier()
    raise ValueError(f"Unknown classifier mode: {mode!r}")
