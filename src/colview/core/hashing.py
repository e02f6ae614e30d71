"""
Canonical JSON serialization and fingerprints for frame summaries.

Two views with the same logical columns, counts, and pending transformations
hash to the same fingerprint, which lets an interpreter cache plans keyed by
shape. Ownership is not part of the fingerprint.

Notes:
    - Canonical JSON: sort_keys=True, separators=(",", ":"), ensure_ascii=False.
    - Hashing is SHA-256 over the UTF-8 encoded canonical JSON string.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from .schema import FrameSummary

__all__ = [
    "json_dumps_canonical",
    "hash_summary",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON with sorted keys and compact separators.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sha256_hexdigest(s: str) -> str:
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def hash_summary(summary: FrameSummary) -> str:
    """
    Fingerprint a FrameSummary.

    Args:
        summary (FrameSummary): Snapshot produced by FrameView.summary().

    Returns:
        str: 64-character hex digest.
    """
    payload = summary.model_dump(mode="json", exclude={"exclusive"})
    return _sha256_hexdigest(json_dumps_canonical(payload))
