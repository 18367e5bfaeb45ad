"""
Delta ingestion from plain text and pasted HTML.

HTML goes through the editor port (an external rich-text engine, or the
bundled clipboard adapter) and the raw ops are then classified, so the
result is the canonical stored form.
"""

from __future__ import annotations

import logging
from typing import Any

from src.components.media import DEFAULT_CONFIG, MediaConfig, classify_delta

from .ports import EditorPort, MimeLookupPort

logger = logging.getLogger(__name__)


def text_to_delta(text: str | None) -> dict[str, Any]:
    """Single-op Delta for a plain string, newline-terminated like editor content."""
    text = text or ""
    if not text.endswith("\n"):
        text += "\n"
    return {"ops": [{"insert": text}]}


def convert_text_to_delta(text: str | None, editor: EditorPort | None = None) -> dict[str, Any]:
    """Build a Delta from plain text, via the editor when one is supplied."""
    if editor is None:
        return text_to_delta(text)
    return editor.text_to_delta(text or "")


def convert_html_to_delta(
    html: str,
    editor: EditorPort,
    config: MediaConfig = DEFAULT_CONFIG,
    mime: MimeLookupPort | None = None,
) -> list[Any]:
    """Convert pasted HTML into a classified Delta."""
    raw = editor.html_to_delta(html)
    logger.debug("Editor produced %d raw ops", len(raw))
    return classify_delta(raw, config, mime)
