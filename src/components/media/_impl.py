"""
Media classifier - decide what a hosted image URL really points at.

Raw Deltas from pasted HTML carry every embedded resource as an image
insert. Classification rewrites each externally hosted one into an image
(unchanged), a video, or a generic downloadable file (fileBlot), based on
the extension of the URL path.

Key behaviors:
- Only image inserts with an allowed scheme (http/https) are examined
- jpg/jpeg/png stay images; known video extensions become video inserts
- Anything else becomes a fileBlot with fileSize null and a best-effort MIME type
- Unparseable URLs and unrecognized ops pass through unchanged
- Input ops are never mutated
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import urlsplit

from src.adapters.mime import MimetypesLookup
from src.domain.delta import (
    FileBlot,
    Image,
    MalformedDeltaError,
    Op,
    Video,
    raw_ops,
)

from .ports import MimeLookupPort

logger = logging.getLogger(__name__)

MediaKind = Literal["image", "video", "file"]

# --- Configuration ---


@dataclass(frozen=True)
class MediaConfig:
    """Media classification configuration from rules."""

    image_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["jpg", "jpeg", "png"])
    )
    video_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["mp4", "mkv", "rmvb", "avi", "mov", "rm", "wmv"])
    )
    case_insensitive_extensions: bool = False
    allowed_schemes: frozenset[str] = field(default_factory=lambda: frozenset(["http", "https"]))


DEFAULT_CONFIG = MediaConfig()

_default_mime = MimetypesLookup()


# --- URL helpers ---


@dataclass(frozen=True)
class HostedUrl:
    """Parsed pieces of a hosted resource URL."""

    url: str
    path: str

    @property
    def extension(self) -> str:
        """Last dot-separated segment of the path (the whole path if no dot)."""
        return self.path.split(".")[-1]

    @property
    def file_name(self) -> str:
        """Last slash-separated segment of the path."""
        return self.path.split("/")[-1]


def parse_hosted_url(url: str, config: MediaConfig = DEFAULT_CONFIG) -> HostedUrl | None:
    """
    Parse an image URL if it is externally hosted.

    Returns None when the scheme is not allowed or the URL cannot be parsed.
    The scheme is compared as written, so "HTTP:" is not hosted. The path
    keeps any ";params" of its last segment.
    """
    scheme, sep, _ = url.partition(":")
    if not sep or scheme not in config.allowed_schemes:
        return None

    try:
        parsed = urlsplit(url)
    except ValueError:
        logger.debug("Unparseable media URL left unclassified: %r", url)
        return None

    return HostedUrl(url=url, path=parsed.path)


def _in(ext: str, extensions: frozenset[str], config: MediaConfig) -> bool:
    if config.case_insensitive_extensions:
        return ext.lower() in {e.lower() for e in extensions}
    return ext in extensions


def _kind(hosted: HostedUrl, config: MediaConfig) -> MediaKind:
    ext = hosted.extension
    if _in(ext, config.image_extensions, config):
        return "image"
    if _in(ext, config.video_extensions, config):
        return "video"
    return "file"


def classify_url(url: str, config: MediaConfig = DEFAULT_CONFIG) -> MediaKind | None:
    """Classify a hosted URL. None means the URL is not classified at all."""
    hosted = parse_hosted_url(url, config)
    if hosted is None:
        return None
    return _kind(hosted, config)


# --- Op classification ---


def classify_op(
    op: Op,
    config: MediaConfig = DEFAULT_CONFIG,
    mime: MimeLookupPort | None = None,
) -> Op:
    """Classify one typed Op. Non-image Ops are returned as-is."""
    if not isinstance(op.insert, Image) or op.insert.url is None:
        return op

    url = op.insert.url
    hosted = parse_hosted_url(url, config)
    if hosted is None:
        return op

    kind = _kind(hosted, config)
    if kind == "image":
        return op
    if kind == "video":
        return Op(insert=Video(url))

    lookup = mime if mime is not None else _default_mime
    file_name = hosted.file_name
    file_type = lookup.guess_type(file_name)
    if file_type is None:
        logger.debug("No MIME type for %r", file_name)

    return Op(
        insert=FileBlot(href=url, file_name=file_name, file_type=file_type),
        attributes={"size": ""},
    )


def classify_raw_op(
    raw: Any,
    config: MediaConfig = DEFAULT_CONFIG,
    mime: MimeLookupPort | None = None,
) -> Any:
    """Classify one wire op; ops that do not parse are copied through unchanged."""
    try:
        op = Op.from_dict(raw)
    except MalformedDeltaError:
        return copy.deepcopy(raw)

    classified = classify_op(op, config, mime)
    if classified is op:
        return copy.deepcopy(raw)
    return classified.to_dict()


def classify_delta(
    delta: Any,
    config: MediaConfig = DEFAULT_CONFIG,
    mime: MimeLookupPort | None = None,
) -> list[Any]:
    """Classify every op of a Delta, returning a new bare list."""
    return [classify_raw_op(raw, config, mime) for raw in raw_ops(delta)]
