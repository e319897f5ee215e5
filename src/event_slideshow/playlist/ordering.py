"""
Module: playlist.ordering

Purpose:
    Fairness ordering: least-shown submissions first, oldest first among
    equals. A submission with play count 0 is always scheduled ahead of
    any submission with play count 1 in the same category.

Key Functions:
    - fairness_key(): Sort key (play_count, created_at)
    - order_by_fairness(): Stable sort of one bucket
    - order_buckets(): Sort every bucket of a CategoryBuckets
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Tuple

from event_slideshow.core.models import Submission

from .partition import CategoryBuckets


def fairness_key(submission: Submission) -> Tuple[int, datetime]:
    """(play_count, created_at); naive timestamps compare as UTC."""
    created = submission.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return (submission.play_count, created)


def order_by_fairness(submissions: Iterable[Submission]) -> List[Submission]:
    """Stable ascending sort by fairness_key; ties keep input order."""
    return sorted(submissions, key=fairness_key)


def order_buckets(buckets: CategoryBuckets) -> CategoryBuckets:
    """Return new buckets with each category sorted by fairness."""
    return CategoryBuckets(
        landscape=order_by_fairness(buckets.landscape),
        square=order_by_fairness(buckets.square),
        portrait=order_by_fairness(buckets.portrait),
        dropped=list(buckets.dropped),
        duplicates=list(buckets.duplicates),
    )
