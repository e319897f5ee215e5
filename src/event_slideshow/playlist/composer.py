"""
Module: playlist.composer

Purpose:
    Interleave single and mosaic units across categories into one
    bounded playlist.

Algorithm:
    One read cursor per category (a MosaicBatcher) and one output counter.
    Each round attempts every category in priority order (landscape,
    portrait, square by default); each category with a full group left
    emits one unit. A round can therefore emit up to three units, which
    mixes shapes within a rotation instead of exhausting one category
    first. The limit is re-checked before every emission.

    Terminates when the limit is reached or a round emits nothing.
    Work is bounded by ``limit`` rounds.

Key Functions:
    - compose_playlist(): Candidate pool -> playlist in one call

Key Classes:
    - PlaylistComposer: Cursor state machine over ordered buckets

Dependencies:
    - playlist.batching: MosaicBatcher
    - playlist.partition / playlist.ordering: Bucket preparation
    - playlist.config: PlaylistConfig

Used By:
    - playlist.controller: build_playlist(), next_candidate()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from event_slideshow.core.models import Slide, Submission, ShapeCategory

from .batching import MosaicBatcher
from .classification import get_classifier
from .config import PlaylistConfig
from .ordering import order_buckets
from .partition import CategoryBuckets, partition_submissions

logger = logging.getLogger(__name__)


@dataclass
class PlaylistComposer:
    """
    Playlist composition state machine.

    Attributes:
        buckets: Fairness-ordered category buckets
        config: Playlist configuration (group sizes, priority)
        limit: Maximum slides to emit; defaults to config.limit

    Example:
        >>> composer = PlaylistComposer(ordered_buckets, PlaylistConfig())
        >>> slides = composer.run()
    """

    buckets: CategoryBuckets
    config: PlaylistConfig = field(default_factory=PlaylistConfig)
    limit: Optional[int] = None

    # Internal state
    _batchers: Dict[ShapeCategory, MosaicBatcher] = field(init=False)
    _slides: List[Slide] = field(init=False, default_factory=list)
    _rounds: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Initialize one cursor per category."""
        if self.limit is None:
            self.limit = self.config.limit
        self._batchers = {
            category: MosaicBatcher(
                category=category,
                items=self.buckets.bucket(category),
                group_size=self.config.group_size_for(category),
            )
            for category in self.config.category_priority
        }
        self._slides = []
        self._rounds = 0

    @property
    def is_full(self) -> bool:
        return len(self._slides) >= self.limit

    @property
    def rounds(self) -> int:
        """Rounds executed so far."""
        return self._rounds

    def leftovers(self) -> Dict[ShapeCategory, int]:
        """Unconsumed items per category."""
        return {category: b.remaining for category, b in self._batchers.items()}

    def step(self) -> int:
        """
        Run one round over all categories.

        Returns:
            Number of slides emitted this round (0 means exhausted)
        """
        emitted = 0
        for category in self.config.category_priority:
            if self.is_full:
                break
            slide = self._batchers[category].take()
            if slide is None:
                continue
            self._slides.append(slide)
            emitted += 1
            logger.debug(
                f"Slide {len(self._slides)}: {slide.kind.value} {category.value} "
                f"{list(slide.submission_ids)}"
            )
        self._rounds += 1
        return emitted

    def run(self) -> Tuple[Slide, ...]:
        """
        Compose the playlist.

        Returns:
            Slides in display order; empty when limit <= 0 or nothing fits
        """
        if self.limit <= 0:
            return ()
        while not self.is_full:
            if self.step() == 0:
                break
        return tuple(self._slides)


def prepare_buckets(
    submissions: Iterable[Submission],
    config: PlaylistConfig,
) -> Tuple[CategoryBuckets, int]:
    """
    Exclude, partition and fairness-order a candidate pool.

    Returns:
        (ordered buckets, number of submissions excluded by config.exclude_ids)
    """
    excluded = 0
    if config.exclude_ids:
        pool = []
        for sub in submissions:
            if sub.id in config.exclude_ids:
                excluded += 1
            else:
                pool.append(sub)
    else:
        pool = list(submissions)

    buckets = partition_submissions(pool, get_classifier(config.classifier_mode))
    return order_buckets(buckets), excluded


def compose_playlist(
    submissions: Iterable[Submission],
    limit: Optional[int] = None,
    config: Optional[PlaylistConfig] = None,
) -> Tuple[Slide, ...]:
    """
    Compose a playlist from a candidate pool.

    Pure function: no I/O, no shared state, same input gives the same
    playlist.

    Args:
        submissions: Candidate pool (not archived / not hidden)
        limit: Maximum slides; defaults to config.limit (10)
        config: Playlist configuration

    Returns:
        Slides in display order (possibly empty)

    Example:
        >>> slides = compose_playlist(pool, limit=3)
        >>> [s.kind.value for s in slides]
        ['single', 'single', 'single']
    """
    config = config or PlaylistConfig()
    if limit is not None and limit <= 0:
        return ()
    buckets, _ = prepare_buckets(submissions, config)
    return PlaylistComposer(buckets, config, limit).run()
