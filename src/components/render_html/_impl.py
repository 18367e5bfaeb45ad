"""
Delta to HTML transcoder.

Walks a Delta in reading order and concatenates one fragment per op. Text
runs go through the attribute renderer; embeds become <img>, <video> or a
mention <span>.

Two variants:
- Full: renders fileBlot as <img>, mentions as an (unclosed) span, image
  and video sources URI-encoded as stored.
- Without file blot: renders only images and videos, with the query
  string removed before encoding. Used to display a classified Delta
  without surfacing raw download links.

Attribute precedence for text runs:
1. Escape & < > ' "
2. strike -> <s>
3. bold -> <strong>, carrying color as an inline rgb() style;
   first newline only becomes a line break
4. not bold: color -> <span style>, else plain; first newline only
5. link -> anchor around the whole fragment
6. No attributes at all: every newline becomes a line break
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from src.domain.delta import (
    FileBlot,
    Image,
    Insert,
    MalformedDeltaError,
    Mention,
    Op,
    Text,
    Video,
    raw_ops,
)

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class HtmlConfig:
    """HTML rendering configuration from rules."""

    # Existing exports use the "herf" spelling; readers depend on it.
    link_attribute: str = "herf"
    line_break: str = "<br>"


DEFAULT_CONFIG = HtmlConfig()


# --- Escaping / encoding ---

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&#39;"),
    ('"', "&quot;"),
)

# Characters encodeURI leaves alone besides letters, digits and "_.-~".
_URI_SAFE = ";,/?:@&=+$!*'()#"

_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]+)")


def escape_html(text: str) -> str:
    """Escape the five HTML special characters."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def encode_uri(url: str) -> str:
    """Percent-encode a full URI, keeping its reserved characters."""
    return quote(url, safe=_URI_SAFE)


def strip_query(url: str) -> str:
    """Drop everything from the first "?" on."""
    return url.split("?")[0]


def _hex_byte(pair: str) -> str:
    # Leading hex digits only; nothing parseable renders as NaN.
    m = _HEX_PREFIX.match(pair)
    return str(int(m.group(1), 16)) if m else "NaN"


def color_style(color: Any) -> str:
    """Convert "#RRGGBB" to an inline "color: rgb(R, G, B);" style."""
    color = str(color)
    r, g, b = (_hex_byte(color[i : i + 2]) for i in (1, 3, 5))
    return f"color: rgb({r}, {g}, {b});"


def _attr_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# --- Attribute Renderer ---


def render_attributes(
    text: str,
    attributes: Mapping[str, Any] | None,
    config: HtmlConfig = DEFAULT_CONFIG,
) -> str:
    """Render a text run with its inline attributes."""
    fragment = escape_html(text)
    br = config.line_break

    if attributes is None:
        return fragment.replace("\n", br)

    if attributes.get("strike"):
        fragment = f"<s>{fragment}</s>"

    # Attributed runs convert the first newline only.
    if attributes.get("bold"):
        body = fragment.replace("\n", br, 1)
        if attributes.get("color"):
            fragment = f'<strong style="{color_style(attributes["color"])}">{body}</strong>'
        else:
            fragment = f"<strong>{body}</strong>"
    else:
        body = fragment.replace("\n", br, 1)
        if attributes.get("color"):
            fragment = f'<span style="{color_style(attributes["color"])}">{body}</span>'
        else:
            fragment = body

    if "link" in attributes:
        fragment = (
            f'<a {config.link_attribute}="{_attr_value(attributes["link"])}">{fragment}</a>'
        )

    return fragment


# --- Embed renderers ---


def render_mention(mention: Mention) -> str:
    """Open a mention span. The element is left unclosed."""
    return (
        '<span class="mention"'
        f' data-index="{_attr_value(mention.index)}"'
        f' data-denotation-char="{_attr_value(mention.denotation_char)}"'
        f' data-id="{_attr_value(mention.id)}"'
        f' data-value="{_attr_value(mention.value)}"'
        f' data-key="{_attr_value(mention.key)}">'
    )


def render_embed_full(insert: Insert) -> str:
    if isinstance(insert, FileBlot):
        return f'<img src="{encode_uri(insert.href)}">'
    if isinstance(insert, Mention):
        return render_mention(insert)
    if isinstance(insert, Image):
        if insert.url is None:
            return ""
        return f'<img src="{encode_uri(insert.url)}">'
    if isinstance(insert, Video):
        return f'<video src="{encode_uri(insert.url)}">'
    return ""


def render_embed_without_file_blot(insert: Insert) -> str:
    if isinstance(insert, Image):
        if insert.url is None:
            return ""
        return f'<img src="{encode_uri(strip_query(insert.url))}">'
    if isinstance(insert, Video):
        return f'<video src="{encode_uri(strip_query(insert.url))}">'
    return ""


# --- Delta walker ---


def render_delta(
    delta: Any,
    render_embed: Callable[[Insert], str],
    config: HtmlConfig = DEFAULT_CONFIG,
) -> tuple[str, list[MalformedDeltaError]]:
    """
    Render a Delta, skipping ops that do not parse.

    Returns:
        Tuple of (html, errors for skipped ops).
    """
    if delta is None:
        return "", []

    try:
        items = raw_ops(delta)
    except MalformedDeltaError as e:
        logger.warning("Cannot render Delta as HTML: %s", e)
        return "", [e]

    parts: list[str] = []
    errors: list[MalformedDeltaError] = []
    for i, item in enumerate(items):
        try:
            op = Op.from_dict(item, path=f"ops[{i}]")
        except MalformedDeltaError as e:
            logger.warning("Skipping malformed op while rendering HTML: %s", e)
            errors.append(e)
            continue

        if isinstance(op.insert, Text):
            parts.append(render_attributes(op.insert.text, op.attributes, config))
        else:
            try:
                parts.append(render_embed(op.insert))
            except UnicodeEncodeError:
                # encodeURI rejects lone surrogates
                err = MalformedDeltaError(
                    "invalid_url", "Media URL cannot be URI-encoded", f"ops[{i}].insert"
                )
                logger.warning("Skipping op while rendering HTML: %s", err)
                errors.append(err)

    return "".join(parts), errors


def delta_to_html(delta: Any, config: HtmlConfig = DEFAULT_CONFIG) -> str:
    """Render a Delta to HTML, expanding file blots into images."""
    html, _ = render_delta(delta, render_embed_full, config)
    return html


def delta_to_html_without_file_blot(delta: Any, config: HtmlConfig = DEFAULT_CONFIG) -> str:
    """Render a Delta to HTML with only images and videos as embeds."""
    html, _ = render_delta(delta, render_embed_without_file_blot, config)
    return html
