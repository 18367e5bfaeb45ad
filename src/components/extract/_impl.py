"""
Media URL extraction for downstream indexing.

Both scans are pure, keep document order and omit empty or null URLs.
Malformed input raises MalformedDeltaError: a half-indexed document is
worse than a failed one.
"""

from __future__ import annotations

from typing import Any

from src.domain.delta import FileBlot, Image, iter_ops


def extract_images(delta: Any) -> list[str]:
    """URLs of all image inserts, in document order."""
    return [
        op.insert.url
        for op in iter_ops(delta)
        if isinstance(op.insert, Image) and op.insert.url
    ]


def extract_files(delta: Any) -> list[str]:
    """hrefs of all fileBlot inserts, in document order."""
    return [
        op.insert.href
        for op in iter_ops(delta)
        if isinstance(op.insert, FileBlot) and op.insert.href
    ]
