"""
Delta to plain text transcoder.

Two projections, both lossy and one-way:

to_plain_text (previews, notifications):
- image / video -> ![url]!
- fileBlot -> ![href]!
- mention -> @value
- other embeds -> ""
- text -> unchanged (no escaping, no newline conversion)

to_pure_text (search indexing):
- ops whose insert is exactly "\\n" are dropped
- mention -> bare value
- other embeds -> ""
- text -> unchanged
- any failure degrades to "" and is logged
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from src.domain.delta import (
    FileBlot,
    Image,
    Insert,
    MalformedDeltaError,
    Mention,
    Op,
    Text,
    Video,
    iter_ops,
    raw_ops,
)

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class PlainTextConfig:
    """Plain text placeholder configuration from rules."""

    media_open: str = "!["
    media_close: str = "]!"
    mention_prefix: str = "@"


DEFAULT_CONFIG = PlainTextConfig()


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def render_plain_insert(insert: Insert, config: PlainTextConfig = DEFAULT_CONFIG) -> str:
    """Plain text fragment for one insert."""
    if isinstance(insert, Text):
        return insert.text
    if isinstance(insert, Image):
        if insert.url is None:
            return ""
        return f"{config.media_open}{insert.url}{config.media_close}"
    if isinstance(insert, FileBlot):
        return f"{config.media_open}{insert.href}{config.media_close}"
    if isinstance(insert, Mention):
        return f"{config.mention_prefix}{_text(insert.value)}"
    if isinstance(insert, Video):
        return f"{config.media_open}{insert.url}{config.media_close}"
    return ""


def plain_text_parts(
    delta: Any,
    config: PlainTextConfig = DEFAULT_CONFIG,
) -> tuple[str, list[MalformedDeltaError]]:
    """
    Project a Delta to plain text, skipping ops that do not parse.

    Returns:
        Tuple of (text, errors for skipped ops).
    """
    if delta is None:
        return "", []

    try:
        items = raw_ops(delta)
    except MalformedDeltaError as e:
        logger.warning("Cannot project Delta to plain text: %s", e)
        return "", [e]

    parts: list[str] = []
    errors: list[MalformedDeltaError] = []
    for i, item in enumerate(items):
        try:
            op = Op.from_dict(item, path=f"ops[{i}]")
        except MalformedDeltaError as e:
            logger.warning("Skipping malformed op in plain text projection: %s", e)
            errors.append(e)
            continue
        parts.append(render_plain_insert(op.insert, config))

    return "".join(parts), errors


def to_plain_text(delta: Any, config: PlainTextConfig = DEFAULT_CONFIG) -> str:
    """Project a Delta to plain text with media placeholders."""
    text, _ = plain_text_parts(delta, config)
    return text


def to_pure_text(delta: Any) -> str:
    """Project a Delta to bare text for indexing. Never raises."""
    if delta is None:
        return ""

    try:
        parts: list[str] = []
        for op in iter_ops(delta):
            insert = op.insert
            if isinstance(insert, Text):
                if insert.text != "\n":
                    parts.append(insert.text)
            elif isinstance(insert, Mention):
                parts.append(_text(insert.value))
        return "".join(parts)
    except MalformedDeltaError:
        logger.exception("Pure text projection failed")
        return ""
