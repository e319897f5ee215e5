"""
Module: playlist.controller

Purpose:
    Orchestrate the complete playlist pipeline.
    Exclude → Partition → Order → Batch/Compose → Extract

Key Functions:
    - build_playlist(): Main entry point, returns PlaylistResult
    - next_candidate(): Single best next slide for a rolling buffer

Key Classes:
    - PlaylistResult: Playlist plus diagnostics

Dependencies:
    - playlist.composer: PlaylistComposer, prepare_buckets
    - playlist.extraction: extract_submission_ids

Used By:
    - event_slideshow.__main__: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from event_slideshow.core.models import Slide, Submission, ShapeCategory

from .composer import PlaylistComposer, prepare_buckets
from .config import PlaylistConfig
from .extraction import extract_submission_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaylistResult:
    """
    Composed playlist with diagnostics (immutable).

    Attributes:
        slides: Slides in display order
        total_candidates: Size of the pool passed in
        excluded_count: Submissions skipped via config.exclude_ids
        dropped: Ids classified UNCLASSIFIABLE
        duplicates: Repeated ids ignored after their first occurrence
        leftovers: Unscheduled items per category (read-only mapping)
        warnings: Human-readable warnings

    Example:
        >>> result = build_playlist(pool, PlaylistConfig(limit=5))
        >>> result.submission_ids  # hand to the play-count writer
    """

    slides: tuple[Slide, ...]
    total_candidates: int = 0
    excluded_count: int = 0
    dropped: tuple[str, ...] = ()
    duplicates: tuple[str, ...] = ()
    leftovers: Mapping[ShapeCategory, int] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Read-only view; the result is frozen
        object.__setattr__(self, "leftovers", MappingProxyType(dict(self.leftovers)))

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    @property
    def is_empty(self) -> bool:
        return len(self.slides) == 0

    @property
    def submission_ids(self) -> List[str]:
        """Flattened ids in display order."""
        return extract_submission_ids(self.slides)

    @property
    def total_submissions(self) -> int:
        """Number of submissions placed in the playlist."""
        return sum(slide.member_count for slide in self.slides)


def build_playlist(
    submissions: Iterable[Submission],
    config: Optional[PlaylistConfig] = None,
) -> PlaylistResult:
    """
    Build a playlist from start to finish.

    Pipeline:
    1. Drop submissions listed in config.exclude_ids
    2. Partition by shape category
    3. Order each category by fairness
    4. Compose singles and mosaics round-robin up to config.limit

    Composition never fails: an empty or too-small pool gives an empty
    playlist with a warning.

    Args:
        submissions: Candidate pool (not archived / not hidden)
        config: Playlist configuration

    Returns:
        PlaylistResult with slides and diagnostics
    """
    config = config or PlaylistConfig()
    pool = list(submissions)
    warnings: List[str] = []
    start_time = time.perf_counter()

    buckets, excluded = prepare_buckets(pool, config)
    if excluded:
        logger.info(f"Excluding {excluded} submission(s) already queued elsewhere")

    composer = PlaylistComposer(buckets, config)
    slides = composer.run()
    leftovers = composer.leftovers()

    if not slides:
        warnings.append("No content to display")
    for category, remaining in leftovers.items():
        group_size = config.group_size_for(category)
        if 0 < remaining < group_size:
            warnings.append(
                f"{remaining} {category.value} submission(s) waiting for a full "
                f"{config.layout_for(category)} group"
            )

    result = PlaylistResult(
        slides=slides,
        total_candidates=len(pool),
        excluded_count=excluded,
        dropped=tuple(sub.id for sub in buckets.dropped),
        duplicates=tuple(sub.id for sub in buckets.duplicates),
        leftovers=leftovers,
        warnings=tuple(warnings),
    )

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Composed {result.slide_count} slide(s) with {result.total_submissions} "
        f"submission(s) from {result.total_candidates} candidate(s) in {elapsed_ms:.1f}ms"
    )
    for warning in warnings:
        logger.debug(f"Playlist warning: {warning}")
    return result


def next_candidate(
    submissions: Iterable[Submission],
    config: Optional[PlaylistConfig] = None,
) -> Optional[Slide]:
    """
    Best next slide for a rolling display buffer.

    Submissions already in the buffer go in config.exclude_ids.

    Returns:
        The first slide a limit-1 playlist would show, or None
    """
    config = config or PlaylistConfig()
    buckets, _ = prepare_buckets(submissions, config)
    slides = PlaylistComposer(buckets, config, limit=1).run()
    return slides[0] if slides else None
