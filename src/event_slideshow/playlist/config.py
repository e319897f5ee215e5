"""
Module: playlist.config

Purpose:
    Configuration dataclass for playlist composition. Immutable
    configuration with validation on construction.

Key Classes:
    - PlaylistConfig: Limit, mosaic group sizes, category priority

Dependencies:
    - dataclasses (std)
    - event_slideshow.core.models: ShapeCategory

Used By:
    - playlist.composer: Cursor state machine
    - playlist.controller: Pipeline orchestration
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Literal, Tuple

from event_slideshow.core.models import ShapeCategory, mosaic_layout


DEFAULT_LIMIT = 10

# Images per display unit; more than one means a mosaic.
PORTRAIT_GROUP_SIZE = 3
SQUARE_GROUP_SIZE = 6
LANDSCAPE_GROUP_SIZE = 1

# Order in which categories are attempted within one composition round.
DEFAULT_CATEGORY_PRIORITY: Tuple[ShapeCategory, ...] = (
    ShapeCategory.LANDSCAPE,
    ShapeCategory.PORTRAIT,
    ShapeCategory.SQUARE,
)

ClassifierMode = Literal["wide", "strict"]


@dataclass(frozen=True)
class PlaylistConfig:
    """
    Configuration for playlist composition (immutable).

    Attributes:
        limit: Maximum number of slides per playlist (0 = empty playlist)
        landscape_group_size: Images per landscape unit (1 = single slides)
        portrait_group_size: Images per portrait mosaic
        square_group_size: Images per square mosaic
        category_priority: Order categories are attempted each round
        classifier_mode: "wide" tolerance bands or "strict" legacy detection
        exclude_ids: Submission ids already queued elsewhere (skipped)

    Invariants:
        - limit >= 0
        - every group size >= 1
        - category_priority lists each schedulable category exactly once

    Example:
        >>> config = PlaylistConfig(limit=5)
        >>> config.layout_for(ShapeCategory.PORTRAIT)
        '3-up'
    """

    limit: int = DEFAULT_LIMIT

    # Mosaic sizes
    landscape_group_size: int = LANDSCAPE_GROUP_SIZE
    portrait_group_size: int = PORTRAIT_GROUP_SIZE
    square_group_size: int = SQUARE_GROUP_SIZE

    # Scheduling
    category_priority: Tuple[ShapeCategory, ...] = DEFAULT_CATEGORY_PRIORITY
    classifier_mode: ClassifierMode = "wide"

    # Rolling buffer support
    exclude_ids: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.limit < 0:
            raise ValueError(f"limit must be non-negative: {self.limit}")
        for name in ("landscape_group_size", "portrait_group_size", "square_group_size"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be positive: {value}")
        schedulable = {c for c in ShapeCategory if c.is_schedulable}
        priority = tuple(self.category_priority)
        if len(priority) != len(set(priority)) or set(priority) != schedulable:
            raise ValueError(
                "category_priority must list landscape, portrait and square exactly once: "
                f"{[c.value for c in priority]}"
            )
        if self.classifier_mode not in ("wide", "strict"):
            raise ValueError(f"Unknown classifier_mode: {self.classifier_mode!r}")
        # Normalise to immutable collections
        object.__setattr__(self, "category_priority", priority)
        object.__setattr__(self, "exclude_ids", frozenset(self.exclude_ids))

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def group_sizes(self) -> dict[ShapeCategory, int]:
        """Group size per schedulable category."""
        return {
            ShapeCategory.LANDSCAPE: self.landscape_group_size,
            ShapeCategory.PORTRAIT: self.portrait_group_size,
            ShapeCategory.SQUARE: self.square_group_size,
        }

    def group_size_for(self, category: ShapeCategory) -> int:
        """
        Get the number of images per display unit for a category.

        Raises:
            KeyError: For UNCLASSIFIABLE, which is never scheduled
        """
        return self.group_sizes[category]

    def layout_for(self, category: ShapeCategory) -> str | None:
        """Mosaic layout hint for a category, None when it displays singly."""
        size = self.group_size_for(category)
        return mosaic_layout(size) if size > 1 else None
