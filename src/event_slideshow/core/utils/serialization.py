"""
Serialization Utilities

Converts stored submission documents into Submission models and composed
playlists back into JSON-ready dictionaries.

Stored documents come in several generations:
- dimensions under ``metadata.finalWidth`` / ``metadata.finalHeight``,
  older ones under ``metadata.originalWidth`` / ``originalHeight``,
  some only at top level ``width`` / ``height``, and the oldest none at all
- image reference under ``imageUrl`` or ``finalImageUrl``
- ``playCount`` missing or null on submissions never shown

Normalisation resolves each of these to one value; dimensions that cannot
be resolved stay None so the model can apply the placeholder size.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from ..models.submission import Submission
from ..models.slides import Slide
from ..schemas.validator import validate_submission, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Submission Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def submission_from_dict(data: dict[str, Any], *, validate: bool = True, strict: bool = False) -> Submission:
    """
    Deserialize a Submission from a stored document.

    Args:
        data: Dictionary from JSON / the submission store
        validate: Whether to run basic validation first
        strict: Whether validation also checks the JSON schema

    Returns:
        Submission instance

    Raises:
        ValidationError: If the document is invalid (e.g. no createdAt)
    """
    if validate:
        validate_submission(data, strict=strict)

    raw_id = data.get("_id")
    if raw_id in (None, ""):
        raw_id = data.get("id")

    metadata = data.get("metadata") or {}

    return Submission(
        id=str(raw_id),
        image_url=data.get("imageUrl") or data.get("finalImageUrl") or "",
        created_at=parse_timestamp(data.get("createdAt")),
        width=_first_dimension(metadata.get("finalWidth"), metadata.get("originalWidth"), data.get("width")),
        height=_first_dimension(metadata.get("finalHeight"), metadata.get("originalHeight"), data.get("height")),
        play_count=data.get("playCount") or 0,
    )


def submissions_from_dicts(documents: Iterable[dict[str, Any]], *, strict: bool = False) -> list[Submission]:
    """Deserialize many documents; the first invalid one raises."""
    return [submission_from_dict(doc, strict=strict) for doc in documents]


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a createdAt value into an aware datetime.

    Accepts datetime objects and ISO-8601 strings (a trailing ``Z`` is
    read as UTC). Naive values are taken to be UTC.

    Raises:
        ValidationError: If value is missing or unparseable
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Invalid createdAt timestamp: {value!r}", path="createdAt") from e
    else:
        raise ValidationError(f"Missing createdAt timestamp: {value!r}", path="createdAt")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _first_dimension(*candidates: Any) -> Optional[int]:
    """First positive finite numeric candidate as int, or None."""
    for value in candidates:
        if isinstance(value, bool):
            continue
        if isinstance(value, (int, float)) and math.isfinite(value) and value > 0:
            return int(value)
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Playlist Serialization
# ─────────────────────────────────────────────────────────────────────────────

def submission_to_dict(submission: Submission) -> dict[str, Any]:
    """Serialize a Submission back to the stored document shape."""
    data: dict[str, Any] = {
        "_id": submission.id,
        "imageUrl": submission.image_url,
        "playCount": submission.play_count,
        "createdAt": submission.created_at.isoformat(),
    }
    if submission.has_dimensions:
        data["metadata"] = {"finalWidth": submission.width, "finalHeight": submission.height}
    return data


def playlist_to_dicts(slides: Iterable[Slide]) -> list[dict[str, Any]]:
    """Serialize a playlist in display order."""
    return [slide.to_dict() for slide in slides]
