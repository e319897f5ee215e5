"""
Module: playlist

Purpose:
    Slideshow playlist composition. Turns an unordered pool of event
    submissions into a bounded, fairly rotated sequence of single and
    mosaic slides.

Key Functions:
    - build_playlist(): Main entry point with diagnostics
    - compose_playlist(): Pure pool -> slides function
    - next_candidate(): Single next slide for a rolling buffer
    - extract_submission_ids(): Ids for the play-count writer

Key Classes:
    - PlaylistConfig: Limit, group sizes, priority
    - PlaylistComposer: Round-robin cursor state machine
    - MosaicBatcher: Fixed-size group cursor
    - AspectClassifier: Dimension -> ShapeCategory

Dependencies:
    - event_slideshow.core.models: Submission, Slide, ShapeCategory

Used By:
    - event_slideshow.__main__: Command-line entry point
"""

from .config import PlaylistConfig, DEFAULT_LIMIT, DEFAULT_CATEGORY_PRIORITY
from .classification import (
    AspectClassifier,
    StrictAspectClassifier,
    classify_aspect,
    get_classifier,
)
from .partition import CategoryBuckets, partition_submissions
from .ordering import fairness_key, order_by_fairness, order_buckets
from .batching import MosaicBatcher, batch_mosaics
from .composer import PlaylistComposer, compose_playlist, prepare_buckets
from .extraction import extract_submission_ids
from .controller import PlaylistResult, build_playlist, next_candidate

__all__ = [
    # Config
    "PlaylistConfig",
    "DEFAULT_LIMIT",
    "DEFAULT_CATEGORY_PRIORITY",
    # Classification
    "AspectClassifier",
    "StrictAspectClassifier",
    "classify_aspect",
    "get_classifier",
    # Partition / ordering
    "CategoryBuckets",
    "partition_submissions",
    "fairness_key",
    "order_by_fairness",
    "order_buckets",
    # Composition
    "MosaicBatcher",
    "batch_mosaics",
    "PlaylistComposer",
    "compose_playlist",
    "prepare_buckets",
    "extract_submission_ids",
    # Controller
    "PlaylistResult",
    "build_playlist",
    "next_candidate",
]
