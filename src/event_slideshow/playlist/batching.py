"""
Module: playlist.batching

Purpose:
    Cut an ordered category bucket into display units. Groups are taken
    from the front, in order, without overlap. A group is only produced
    when a full group remains; a short remainder is left for the next
    composition call and never padded with repeats or placeholders.

Key Functions:
    - batch_mosaics(): Every full group of a bucket as Slides

Key Classes:
    - MosaicBatcher: Read cursor over one bucket

Dependencies:
    - event_slideshow.core.models: Slide, Submission, ShapeCategory

Used By:
    - playlist.composer: One batcher per category
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from event_slideshow.core.models import Slide, Submission, ShapeCategory


@dataclass
class MosaicBatcher:
    """
    Read cursor producing fixed-size display units from one bucket.

    Group size 1 yields single slides; larger sizes yield mosaics whose
    layout hint is the group size ("3-up", "6-up").

    Attributes:
        category: Category shared by every item in the bucket
        items: Fairness-ordered bucket
        group_size: Items per display unit

    Example:
        >>> batcher = MosaicBatcher(ShapeCategory.PORTRAIT, portraits, 3)
        >>> slide = batcher.take()  # first three portraits, or None
    """

    category: ShapeCategory
    items: Sequence[Submission]
    group_size: int

    _cursor: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.group_size < 1:
            raise ValueError(f"group_size must be positive: {self.group_size}")

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        """Items not yet consumed."""
        return len(self.items) - self._cursor

    def can_take(self) -> bool:
        """True when a full group remains from the cursor."""
        return self.remaining >= self.group_size

    def take(self) -> Optional[Slide]:
        """
        Consume the next full group.

        Returns:
            Slide for the group, or None when fewer than group_size remain
        """
        if not self.can_take():
            return None
        group = tuple(self.items[self._cursor:self._cursor + self.group_size])
        self._cursor += self.group_size
        if self.group_size == 1:
            return Slide.single(self.category, group[0])
        return Slide.mosaic(self.category, group)


def batch_mosaics(
    items: Sequence[Submission],
    category: ShapeCategory,
    group_size: int,
) -> List[Slide]:
    """
    Split a bucket into every full group it holds.

    Args:
        items: Fairness-ordered bucket
        category: Category of the bucket
        group_size: Items per unit

    Returns:
        Slides in bucket order; len(items) % group_size items are left out
    """
    batcher = MosaicBatcher(category, items, group_size)
    slides: List[Slide] = []
    while True:
        slide = batcher.take()
        if slide is None:
            return slides
        slides.append(slide)
