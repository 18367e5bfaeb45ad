"""
HTML clipboard editor adapter.

Converts a pasted HTML fragment into raw Delta ops the way a rich-text
editor's clipboard module does for the flat inline model: bold, strike,
color and link formats, images, videos, mentions and line breaks. Nested
block structure is flattened into newlines.

The output is unclassified: every <img> becomes an image insert, whatever
the URL points at.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag

from src.components.ingest import text_to_delta

logger = logging.getLogger(__name__)

BOLD_TAGS = frozenset(["strong", "b"])
STRIKE_TAGS = frozenset(["s", "strike", "del"])
BLOCK_TAGS = frozenset(
    ["p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "li", "blockquote", "pre", "tr"]
)
SKIPPED_TAGS = frozenset(["script", "style", "head", "title"])

_RGB_RE = re.compile(r"rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})")
_HEX_RE = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")
_WS_RE = re.compile(r"\s+")


def normalize_color(value: str) -> str | None:
    """Normalize a CSS color to #rrggbb, or None if not recognized."""
    value = value.strip()
    m = _RGB_RE.match(value)
    if m:
        r, g, b = (min(255, int(part)) for part in m.groups())
        return f"#{r:02x}{g:02x}{b:02x}"
    m = _HEX_RE.match(value)
    if m:
        digits = m.group(1).lower()
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}"
    return None


def _style_color(style: str) -> str | None:
    for declaration in style.split(";"):
        name, _, value = declaration.partition(":")
        if name.strip().lower() == "color":
            return normalize_color(value)
    return None


def _formats(tag: Tag) -> dict[str, Any]:
    """Inline formats contributed by one element."""
    formats: dict[str, Any] = {}
    if tag.name in BOLD_TAGS:
        formats["bold"] = True
    elif tag.name in STRIKE_TAGS:
        formats["strike"] = True
    elif tag.name == "a" and tag.get("href"):
        formats["link"] = tag["href"]

    if tag.name == "font" and tag.get("color"):
        color = normalize_color(tag["color"])
        if color:
            formats["color"] = color

    style = tag.get("style")
    if style:
        color = _style_color(style)
        if color:
            formats["color"] = color
        if "font-weight" in style and "bold" in style:
            formats["bold"] = True
    return formats


def _mention_data(tag: Tag) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for name, value in tag.attrs.items():
        if not name.startswith("data-"):
            continue
        parts = name[len("data-") :].split("-")
        key = parts[0] + "".join(p.capitalize() for p in parts[1:])
        data[key] = value
    return data


class _DeltaBuilder:
    def __init__(self) -> None:
        self.ops: list[dict[str, Any]] = []

    def push_text(self, text: str, attributes: dict[str, Any]) -> None:
        if not text:
            return
        last = self.ops[-1] if self.ops else None
        if (
            last is not None
            and isinstance(last["insert"], str)
            and last.get("attributes", {}) == attributes
        ):
            last["insert"] += text
            return
        op: dict[str, Any] = {"insert": text}
        if attributes:
            op["attributes"] = dict(attributes)
        self.ops.append(op)

    def push_newline(self) -> None:
        self.push_text("\n", {})

    def ends_with_newline(self) -> bool:
        if not self.ops:
            return True
        last = self.ops[-1]["insert"]
        return isinstance(last, str) and last.endswith("\n")

    def walk(self, node: Tag, attributes: dict[str, Any]) -> None:
        for child in node.children:
            if isinstance(child, Tag):
                self.element(child, attributes)
            elif type(child) is NavigableString:
                # Comments, doctypes and CDATA are NavigableString subclasses
                self.text(str(child), attributes)

    def text(self, data: str, attributes: dict[str, Any]) -> None:
        text = _WS_RE.sub(" ", data)
        if text.strip() or (self.ops and not self.ends_with_newline()):
            self.push_text(text, attributes)

    def element(self, tag: Tag, attributes: dict[str, Any]) -> None:
        name = tag.name
        if name in SKIPPED_TAGS:
            return
        if name == "br":
            self.push_newline()
            return
        if name == "img":
            if tag.get("src"):
                self.ops.append({"insert": {"image": tag["src"]}})
            return
        if name in ("video", "iframe") and tag.get("src"):
            self.ops.append({"insert": {"video": tag["src"]}})
            return
        if name == "span" and "mention" in (tag.get("class") or []):
            self.ops.append({"insert": {"mention": _mention_data(tag)}})
            return

        self.walk(tag, {**attributes, **_formats(tag)})

        if name in BLOCK_TAGS and not self.ends_with_newline():
            self.push_newline()


class HtmlClipboardEditor:
    """EditorPort implementation backed by BeautifulSoup."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def html_to_delta(self, html: str) -> list[dict[str, Any]]:
        soup = BeautifulSoup(html or "", self.parser)
        builder = _DeltaBuilder()
        builder.walk(soup, {})

        # Editor content always ends with a newline
        if not builder.ops or not builder.ends_with_newline():
            builder.push_newline()

        logger.debug("Converted HTML fragment into %d ops", len(builder.ops))
        return builder.ops

    def text_to_delta(self, text: str) -> dict[str, Any]:
        return text_to_delta(text)
