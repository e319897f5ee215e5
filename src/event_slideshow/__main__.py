"""
Compose a slideshow playlist from an exported submission pool.

Usage:
    python -m event_slideshow submissions.json --limit 10
    python -m event_slideshow submissions.jsonl --exclude id1,id2 --next-candidate
    python -m event_slideshow submissions.json --ids-only
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from event_slideshow import __version__
from event_slideshow.core.utils import playlist_to_dicts
from event_slideshow.loading import load_submissions, LoaderError
from event_slideshow.playlist import (
    DEFAULT_LIMIT,
    PlaylistConfig,
    build_playlist,
    next_candidate,
)

logger = logging.getLogger("event_slideshow")


def _parse_ids(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="event_slideshow",
        description="Compose a fair-rotation slideshow playlist from event submissions.",
    )
    parser.add_argument("submissions", type=Path, help="JSON array or JSONL file of submission documents")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="Maximum slides (default: %(default)s)")
    parser.add_argument("--exclude", type=_parse_ids, default=[], help="Comma-separated ids already queued elsewhere")
    parser.add_argument("--next-candidate", action="store_true", help="Print only the single next slide")
    parser.add_argument("--ids-only", action="store_true", help="Print the flattened submission ids")
    parser.add_argument("--strict", action="store_true", help="Validate documents against the JSON schema")
    parser.add_argument("--strict-shapes", action="store_true", help="Use exact-ratio shape detection")
    parser.add_argument("--probe-images", action="store_true", help="Read missing dimensions from local images")
    parser.add_argument("--image-root", type=Path, default=None, help="Directory image references resolve against")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    if args.limit < 0:
        # Treated like zero: an empty playlist, not an error.
        args.limit = 0

    try:
        loaded = load_submissions(
            args.submissions,
            strict=args.strict,
            probe_images=args.probe_images,
            image_root=args.image_root,
        )
    except LoaderError as e:
        logger.error(f"Error: {e}")
        return 1

    config = PlaylistConfig(
        limit=args.limit,
        classifier_mode="strict" if args.strict_shapes else "wide",
        exclude_ids=frozenset(args.exclude),
    )

    if args.next_candidate:
        slide = next_candidate(loaded.submissions, config)
        output = {
            "candidate": slide.to_dict() if slide else None,
            "totalAvailable": sum(1 for s in loaded.submissions if s.id not in config.exclude_ids),
        }
        print(json.dumps(output, indent=2))
        return 0

    result = build_playlist(loaded.submissions, config)
    for warning in result.warnings:
        logger.warning(warning)

    if args.ids_only:
        print(json.dumps(result.submission_ids))
        return 0

    print(json.dumps({
        "playlist": playlist_to_dicts(result.slides),
        "submissionIds": result.submission_ids,
        "totalSubmissions": result.total_candidates,
    }, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
