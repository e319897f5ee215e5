"""
Module: playlist.partition

Purpose:
    Split the candidate pool into per-category buckets, preserving input
    order within each bucket.

Key Functions:
    - partition_submissions(): Classify and bucket a candidate pool

Key Classes:
    - CategoryBuckets: Landscape / square / portrait buckets plus the
      submissions that could not be scheduled

Dependencies:
    - playlist.classification: AspectClassifier
    - event_slideshow.core.models: Submission, ShapeCategory

Used By:
    - playlist.controller: First pipeline stage
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from event_slideshow.core.models import Submission, ShapeCategory

from .classification import AspectClassifier, classify_aspect

logger = logging.getLogger(__name__)


@dataclass
class CategoryBuckets:
    """
    Result of partitioning a candidate pool.

    Attributes:
        landscape: Landscape submissions in input order
        square: Square submissions in input order
        portrait: Portrait submissions in input order
        dropped: Submissions classified UNCLASSIFIABLE (not scheduled)
        duplicates: Repeated ids after their first occurrence (not scheduled)
    """

    landscape: List[Submission] = field(default_factory=list)
    square: List[Submission] = field(default_factory=list)
    portrait: List[Submission] = field(default_factory=list)
    dropped: List[Submission] = field(default_factory=list)
    duplicates: List[Submission] = field(default_factory=list)

    def bucket(self, category: ShapeCategory) -> List[Submission]:
        """
        Get the bucket for a schedulable category.

        Raises:
            KeyError: For UNCLASSIFIABLE
        """
        return self.as_dict()[category]

    def as_dict(self) -> Dict[ShapeCategory, List[Submission]]:
        return {
            ShapeCategory.LANDSCAPE: self.landscape,
            ShapeCategory.SQUARE: self.square,
            ShapeCategory.PORTRAIT: self.portrait,
        }

    @property
    def scheduled_count(self) -> int:
        """Submissions that made it into a bucket."""
        return len(self.landscape) + len(self.square) + len(self.portrait)


def partition_submissions(
    submissions: Iterable[Submission],
    classifier: Optional[AspectClassifier] = None,
) -> CategoryBuckets:
    """
    Classify each submission and place it in its category bucket.

    A submission id is placed at most once; later repeats are recorded
    in ``duplicates``. UNCLASSIFIABLE submissions are recorded in
    ``dropped`` and logged.

    Args:
        submissions: Candidate pool, in the caller's order
        classifier: Classifier to use (default wide-band)

    Returns:
        CategoryBuckets with input order preserved per bucket
    """
    buckets = CategoryBuckets()
    seen_ids: set[str] = set()
    by_category = buckets.as_dict()

    for submission in submissions:
        if submission.id in seen_ids:
            logger.debug(f"Skipping duplicate submission {submission.id}")
            buckets.duplicates.append(submission)
            continue
        seen_ids.add(submission.id)

        width, height = submission.display_size
        if classifier is None:
            category = classify_aspect(width, height)
        else:
            category = classifier.classify(width, height)

        if category is ShapeCategory.UNCLASSIFIABLE:
            logger.debug(
                f"Dropping {submission.id}: {width}x{height} "
                f"(ratio {width / height:.3f}) fits no display shape"
            )
            buckets.dropped.append(submission)
            continue

        by_category[category].append(submission)

    if buckets.dropped:
        logger.warning(f"{len(buckets.dropped)} submission(s) unclassifiable, not scheduled")
    if buckets.duplicates:
        logger.warning(f"{len(buckets.duplicates)} duplicate submission id(s) ignored")

    logger.debug(
        f"Partitioned {buckets.scheduled_count} submissions: "
        f"{len(buckets.landscape)} landscape, {len(buckets.square)} square, "
        f"{len(buckets.portrait)} portrait"
    )
    return buckets
