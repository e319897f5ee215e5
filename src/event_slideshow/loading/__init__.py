"""
Module: loading

Purpose:
    Read submission pools exported from the submission store.

Key Functions:
    - load_submissions(): Load and normalise a pool from JSON / JSONL
"""

from .loader import load_submissions, read_documents, LoadResult, LoaderError

__all__ = [
    "load_submissions",
    "read_documents",
    "LoadResult",
    "LoaderError",
]
