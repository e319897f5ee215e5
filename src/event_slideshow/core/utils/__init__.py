"""Serialization helpers for core models."""

from .serialization import (
    submission_from_dict,
    submissions_from_dicts,
    submission_to_dict,
    playlist_to_dicts,
    parse_timestamp,
)

__all__ = [
    "submission_from_dict",
    "submissions_from_dicts",
    "submission_to_dict",
    "playlist_to_dicts",
    "parse_timestamp",
]
