"""
Module: loading.loader

Purpose:
    Load a submission pool from a JSON export. Accepts a JSON array, an
    object with a ``submissions`` array, or JSON Lines (one document per
    line). Each document is validated and normalised into a Submission;
    invalid documents are skipped with a warning so one bad record never
    empties the slideshow.

Key Functions:
    - load_submissions(): Load and normalise a pool from a file
    - read_documents(): Raw documents from a file

Key Classes:
    - LoadResult: Loaded submissions plus skipped documents
    - LoaderError: Exception for unreadable files

Dependencies:
    - json (std)
    - event_slideshow.core.utils.serialization: Normalisation
    - event_slideshow.images: Optional dimension probing (Pillow)

Used By:
    - event_slideshow.__main__: Command-line entry point
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, List, Optional, Tuple

from event_slideshow.core.models import Submission
from event_slideshow.core.schemas import ValidationError
from event_slideshow.core.utils import submission_from_dict
from event_slideshow.images import probe_dimensions, resolve_image_path, ImageNotFoundError


logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error loading submissions from a file."""
    pass


@dataclass(frozen=True)
class LoadResult:
    """
    Result of loading a submission file.

    Attributes:
        submissions: Valid submissions in file order
        skipped: (document index, reason) for each rejected document
        probed: Number of submissions whose dimensions were read from the image
    """

    submissions: tuple[Submission, ...]
    skipped: tuple[Tuple[int, str], ...] = ()
    probed: int = 0

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def read_documents(path: Path) -> List[Any]:
    """
    Read raw submission documents from a JSON or JSON Lines file.

    Raises:
        LoaderError: If the file is missing or not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise LoaderError(f"Submission file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e

    if path.suffix.lower() == ".jsonl":
        documents = []
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                documents.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise LoaderError(f"{path}:{line_no}: invalid JSON: {e}") from e
        return documents

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"{path}: invalid JSON: {e}") from e

    if isinstance(payload, dict) and isinstance(payload.get("submissions"), list):
        return payload["submissions"]
    if isinstance(payload, list):
        return payload
    raise LoaderError(f"{path}: expected a JSON array or an object with 'submissions'")


def load_submissions(
    path: Path,
    *,
    strict: bool = False,
    probe_images: bool = False,
    image_root: Optional[Path] = None,
) -> LoadResult:
    """
    Load and normalise a submission pool.

    Args:
        path: JSON / JSONL file of submission documents
        strict: Validate each document against the JSON schema
        probe_images: Read dimensions from local images when undeclared
        image_root: Directory image references are resolved against

    Returns:
        LoadResult with submissions in file order

    Raises:
        LoaderError: If the file cannot be read or parsed
    """
    documents = read_documents(path)
    submissions: List[Submission] = []
    skipped: List[Tuple[int, str]] = []
    probed = 0

    for index, doc in enumerate(documents):
        try:
            submission = submission_from_dict(doc, strict=strict)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Skipping submission #{index}: {e}")
            skipped.append((index, str(e)))
            continue

        if probe_images and not submission.has_dimensions:
            inferred = _probe(submission, image_root)
            if inferred is not None:
                submission = inferred
                probed += 1

        submissions.append(submission)

    logger.info(
        f"Loaded {len(submissions)} submission(s) from {Path(path).name}"
        + (f", skipped {len(skipped)}" if skipped else "")
        + (f", probed {probed}" if probed else "")
    )
    return LoadResult(submissions=tuple(submissions), skipped=tuple(skipped), probed=probed)


def _probe(submission: Submission, image_root: Optional[Path]) -> Optional[Submission]:
    """Submission with probed dimensions, or None to keep the placeholder."""
    image_path = resolve_image_path(submission.image_url, image_root)
    if image_path is None:
        return None
    try:
        width, height = probe_dimensions(image_path)
    except ImageNotFoundError as e:
        logger.warning(f"Cannot infer dimensions for {submission.id}: {e}")
        return None
    logger.debug(f"Probed {submission.id}: {width}x{height}")
    return replace(submission, width=width, height=height)
