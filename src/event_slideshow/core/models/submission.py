"""
Module: submission

Purpose:
    Provides the Submission dataclass - the read-only view of one
    user-submitted image that the playlist pipeline schedules. Storage
    owns these records; the pipeline never mutates them.

Key Classes:
    - Submission: Immutable candidate for the slideshow rotation

Dependencies:
    - dataclasses (std)
    - datetime (std)
    - event_slideshow.common.thresholds: Placeholder dimensions

Used By:
    - core.models.slides.Slide
    - playlist.* (every pipeline stage)
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from event_slideshow.common.thresholds import DEFAULT_DIMENSIONS


@dataclass(frozen=True, slots=True)
class Submission:
    """
    One image submitted to an event (immutable).

    Attributes:
        id: Submission identifier (stringified storage id)
        image_url: Reference to the displayable image
        created_at: Creation timestamp, used as fairness tie-breaker
        width: Declared or inferred pixel width (None if unknown)
        height: Declared or inferred pixel height (None if unknown)
        play_count: Number of prior display occurrences (fairness counter)

    Invariants:
        - id is non-empty
        - play_count >= 0

    Example:
        >>> sub = Submission("a1", "https://cdn/a1.jpg", datetime(2024, 5, 1))
        >>> sub.display_size
        (1920, 1080)
    """

    id: str
    image_url: str
    created_at: datetime
    width: Optional[int] = None
    height: Optional[int] = None
    play_count: int = 0

    def __post_init__(self) -> None:
        """Validate submission on construction."""
        if not self.id:
            raise ValueError("Submission id cannot be empty")
        if self.play_count < 0:
            raise ValueError(f"play_count cannot be negative: {self.play_count}")

    @property
    def has_dimensions(self) -> bool:
        """True when both dimensions are declared and positive."""
        return bool(self.width and self.width > 0 and self.height and self.height > 0)

    @property
    def display_size(self) -> Tuple[int, int]:
        """
        (width, height) used for classification and display.

        Each missing or non-positive dimension is replaced independently
        by the landscape placeholder (1920x1080).
        """
        width = self.width if self.width and self.width > 0 else DEFAULT_DIMENSIONS.width
        height = self.height if self.height and self.height > 0 else DEFAULT_DIMENSIONS.height
        return (width, height)

    @property
    def aspect_ratio(self) -> float:
        """width / height of display_size."""
        width, height = self.display_size
        return width / height
