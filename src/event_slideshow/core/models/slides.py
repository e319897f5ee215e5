"""
Module: slides

Purpose:
    Display-unit models for the slideshow. A Slide is one step of the
    rotation: either a single full-screen image or a fixed-size mosaic of
    same-shape images.

Key Classes:
    - ShapeCategory: Display-shape bucket derived from aspect ratio
    - SlideKind: single / mosaic
    - Slide: Immutable display unit

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .submission.Submission

Used By:
    - playlist.batching: Creates Slides
    - playlist.composer: Orders Slides into a playlist
    - playlist.extraction: Flattens Slides into submission ids
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .submission import Submission


class ShapeCategory(str, Enum):
    """Display-shape category of a submission."""

    LANDSCAPE = "landscape"
    SQUARE = "square"
    PORTRAIT = "portrait"
    UNCLASSIFIABLE = "unclassifiable"

    @property
    def ratio_label(self) -> str:
        """Nominal ratio shown to display clients ("16:9", "1:1", "9:16")."""
        return _RATIO_LABELS[self]

    @property
    def is_schedulable(self) -> bool:
        return self is not ShapeCategory.UNCLASSIFIABLE


_RATIO_LABELS = {
    ShapeCategory.LANDSCAPE: "16:9",
    ShapeCategory.SQUARE: "1:1",
    ShapeCategory.PORTRAIT: "9:16",
    ShapeCategory.UNCLASSIFIABLE: "unknown",
}


class SlideKind(str, Enum):
    SINGLE = "single"
    MOSAIC = "mosaic"


def mosaic_layout(group_size: int) -> str:
    """Layout hint for a mosaic of group_size images, e.g. "3-up"."""
    return f"{group_size}-up"


@dataclass(frozen=True)
class Slide:
    """
    One display unit of the slideshow (immutable).

    Attributes:
        kind: SINGLE or MOSAIC
        category: Shape category the slide is displayed as; members come
            from one category bucket (see playlist.batching)
        submissions: Members in display order
        layout: Mosaic layout hint ("3-up", "6-up"); None for singles

    Invariants:
        - SINGLE slides hold exactly one submission and no layout
        - MOSAIC slides hold at least two submissions
        - MOSAIC layout matches member count
        - category is schedulable

    Example:
        >>> slide = Slide.mosaic(ShapeCategory.PORTRAIT, (a, b, c))
        >>> slide.layout
        '3-up'
    """

    kind: SlideKind
    category: ShapeCategory
    submissions: tuple[Submission, ...]
    layout: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate slide on construction."""
        if not self.category.is_schedulable:
            raise ValueError(f"Cannot build a slide for category {self.category.value!r}")
        if self.kind is SlideKind.SINGLE:
            if len(self.submissions) != 1:
                raise ValueError(
                    f"Single slide needs exactly 1 submission, got {len(self.submissions)}"
                )
            if self.layout is not None:
                raise ValueError("Single slide cannot carry a mosaic layout")
        else:
            if len(self.submissions) < 2:
                raise ValueError(
                    f"Mosaic slide needs at least 2 submissions, got {len(self.submissions)}"
                )
            expected = mosaic_layout(len(self.submissions))
            if self.layout != expected:
                raise ValueError(f"Mosaic layout {self.layout!r} does not match {expected!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def single(cls, category: ShapeCategory, submission: Submission) -> Slide:
        """Create a full-screen slide for one submission."""
        return cls(kind=SlideKind.SINGLE, category=category, submissions=(submission,))

    @classmethod
    def mosaic(cls, category: ShapeCategory, submissions: tuple[Submission, ...]) -> Slide:
        """Create a mosaic slide; the layout hint follows the member count."""
        members = tuple(submissions)
        return cls(
            kind=SlideKind.MOSAIC,
            category=category,
            submissions=members,
            layout=mosaic_layout(len(members)),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_mosaic(self) -> bool:
        return self.kind is SlideKind.MOSAIC

    @property
    def member_count(self) -> int:
        return len(self.submissions)

    @property
    def submission_ids(self) -> tuple[str, ...]:
        return tuple(sub.id for sub in self.submissions)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the JSON shape consumed by display clients.

        Returns:
            Dict with type, aspectRatio, layout and member submissions
        """
        members = []
        for sub in self.submissions:
            width, height = sub.display_size
            members.append({
                "_id": sub.id,
                "imageUrl": sub.image_url,
                "width": width,
                "height": height,
            })
        return {
            "type": self.kind.value,
            "aspectRatio": self.category.ratio_label,
            "layout": self.layout,
            "submissions": members,
        }
