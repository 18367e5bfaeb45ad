"""
Delta schema migration between v1 and v2.

v1 stores a text run as a bare string insert; v2 boxes it as
{"text": string}. Every other op is identical in both schemas.

Key behaviors:
- v1 -> v2 boxes every string insert
- v2 -> v1 unboxes {"text": string} inserts
- v2 -> v1 drops an "image" key whose value is null
- v2 -> v1 maps a null Delta to []
- Both return new lists of new ops; the input is never mutated
- Structurally malformed input raises MalformedDeltaError
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from src.domain.delta import (
    BoxedText,
    Embed,
    Image,
    MalformedDeltaError,
    Op,
    Text,
    iter_ops,
)

logger = logging.getLogger(__name__)

SCHEMA_V1 = 1
SCHEMA_V2 = 2


def box_op(op: Op) -> Op:
    """v1 -> v2 for a single op."""
    if isinstance(op.insert, Text):
        return replace(op, insert=BoxedText(op.insert.text))
    return op


def unbox_op(op: Op) -> Op:
    """v2 -> v1 for a single op, including null-image cleanup."""
    insert = op.insert
    if isinstance(insert, BoxedText):
        if insert.extra:
            logger.debug("Dropping extra keys of boxed text: %s", sorted(insert.extra))
        return replace(op, insert=Text(insert.text))
    if isinstance(insert, Image) and insert.url is None:
        return replace(op, insert=Embed(dict(insert.extra)))
    return op


def delta_v1_to_v2(delta: Any) -> list[dict[str, Any]]:
    """Convert a v1 Delta to v2. Raises MalformedDeltaError."""
    if delta is None:
        raise MalformedDeltaError("invalid_delta", "Delta must be a sequence of ops")
    return [box_op(op).to_dict() for op in iter_ops(delta)]


def delta_v2_to_v1(delta: Any) -> list[dict[str, Any]]:
    """Convert a v2 Delta to v1. None maps to []. Raises MalformedDeltaError."""
    if delta is None:
        return []
    return [unbox_op(op).to_dict() for op in iter_ops(delta)]


def detect_schema(delta: Any) -> int | None:
    """
    Guess the schema version of a Delta from its text runs.

    Returns None when the Delta has no text runs (both schemas agree).
    Raises MalformedDeltaError on a mix of bare and boxed runs.
    """
    has_bare = False
    has_boxed = False
    for op in iter_ops(delta):
        has_bare = has_bare or isinstance(op.insert, Text)
        has_boxed = has_boxed or isinstance(op.insert, BoxedText)

    if has_bare and has_boxed:
        raise MalformedDeltaError("mixed_schema", "Delta mixes v1 and v2 text runs")
    if has_boxed:
        return SCHEMA_V2
    if has_bare:
        return SCHEMA_V1
    return None
