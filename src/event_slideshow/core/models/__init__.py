"""
Core Models Package

Immutable, validated data models shared by every pipeline stage.

All models are frozen dataclasses: the playlist pipeline reads a snapshot
of the submission pool and builds new Slides, it never edits a record.
"""

from .submission import Submission
from .slides import ShapeCategory, SlideKind, Slide, mosaic_layout

__all__ = [
    "Submission",
    "ShapeCategory",
    "SlideKind",
    "Slide",
    "mosaic_layout",
]
