"""
Module: playlist.extraction

Purpose:
    Flatten a playlist into the submission ids it displays, in display
    order. The external play-count writer increments counters from this
    list once the display cycle completes.
"""

from __future__ import annotations

from typing import Iterable, List

from event_slideshow.core.models import Slide


def extract_submission_ids(slides: Iterable[Slide]) -> List[str]:
    """
    Every member id of every slide, in playlist order.

    Example:
        >>> extract_submission_ids([single_a, mosaic_bcd])
        ['a', 'b', 'c', 'd']
    """
    ids: List[str] = []
    for slide in slides:
        for submission in slide.submissions:
            ids.append(submission.id)
    return ids
