"""
Delta document model.

A Delta is an ordered list of insert operations. On the wire each Op is a
mapping ``{"insert": ..., "attributes": {...}}`` and a Delta is either a bare
list of Ops or ``{"ops": [...]}``. Internally each insert is one variant of a
tagged union, so renderers match on type instead of probing keys.

Invariants:
- Exactly one insert discriminator per Op
- FileBlot.file_size is always None
- from_dict/to_dict never share mutable state with the caller
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Keys that select an object-insert variant.
DISCRIMINATORS: tuple[str, ...] = ("text", "image", "video", "fileBlot", "mention")


# --- Errors ---


class MalformedDeltaError(ValueError):
    """Raised when a Delta or Op does not have a valid insert shape."""

    def __init__(self, code: str, message: str, path: str | None = None) -> None:
        self.code = code
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


# --- Insert Variants ---


@dataclass(frozen=True)
class Text:
    """Plain text run (schema v1)."""

    text: str

    def to_wire(self) -> Any:
        return self.text


@dataclass(frozen=True)
class BoxedText:
    """Boxed text run (schema v2)."""

    text: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> Any:
        return {**copy.deepcopy(self.extra), "text": self.text}


@dataclass(frozen=True)
class Image:
    """External image reference. url is None for a cleared image slot."""

    url: str | None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> Any:
        return {**copy.deepcopy(self.extra), "image": self.url}


@dataclass(frozen=True)
class Video:
    """Classified video reference."""

    url: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> Any:
        return {**copy.deepcopy(self.extra), "video": self.url}


@dataclass(frozen=True)
class FileBlot:
    """Classified generic downloadable resource."""

    href: str
    file_name: str
    file_type: str | None = None
    file_size: None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> Any:
        return {
            **copy.deepcopy(self.extra),
            "fileBlot": {
                "href": self.href,
                "fileName": self.file_name,
                "fileSize": None,
                "fileType": self.file_type,
            },
        }


@dataclass(frozen=True)
class Mention:
    """Reference to a tagged entity, e.g. a user mention."""

    data: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def value(self) -> Any:
        return self.data.get("value")

    @property
    def index(self) -> Any:
        return self.data.get("index")

    @property
    def denotation_char(self) -> Any:
        return self.data.get("denotationChar")

    @property
    def id(self) -> Any:
        return self.data.get("id")

    @property
    def key(self) -> Any:
        return self.data.get("key")

    def to_wire(self) -> Any:
        return {**copy.deepcopy(self.extra), "mention": copy.deepcopy(self.data)}


@dataclass(frozen=True)
class Embed:
    """Any other object insert; kept verbatim."""

    payload: dict[str, Any] = field(default_factory=dict)

    def to_wire(self) -> Any:
        return copy.deepcopy(self.payload)


Insert = Text | BoxedText | Image | Video | FileBlot | Mention | Embed


# --- Op ---


@dataclass(frozen=True)
class Op:
    """
    One insert operation.

    attributes is None when the wire Op had no "attributes" key, which is
    distinct from an empty mapping.
    """

    insert: Insert
    attributes: dict[str, Any] | None = None

    @property
    def is_object(self) -> bool:
        return not isinstance(self.insert, Text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to wire mapping."""
        result: dict[str, Any] = {"insert": self.insert.to_wire()}
        if self.attributes is not None:
            result["attributes"] = copy.deepcopy(self.attributes)
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str | None = None) -> Op:
        """Create from wire mapping. Raises MalformedDeltaError."""
        if not isinstance(data, Mapping):
            raise MalformedDeltaError("op_not_mapping", "Op must be a mapping", path)
        if "insert" not in data:
            raise MalformedDeltaError("missing_insert", "Op has no insert", path)

        attributes = data.get("attributes")
        if attributes is not None and not isinstance(attributes, Mapping):
            raise MalformedDeltaError(
                "invalid_attributes", "Op attributes must be a mapping", _join(path, "attributes")
            )

        return cls(
            insert=parse_insert(data["insert"], _join(path, "insert")),
            attributes=copy.deepcopy(dict(attributes)) if attributes is not None else None,
        )


def _join(path: str | None, part: str) -> str:
    return f"{path}.{part}" if path else part


def parse_insert(value: Any, path: str | None = None) -> Insert:
    """Parse a wire insert value into its variant."""
    if isinstance(value, str):
        return Text(value)
    if not isinstance(value, Mapping):
        raise MalformedDeltaError(
            "invalid_insert", "Insert must be a string or a mapping", path
        )

    present = [key for key in DISCRIMINATORS if key in value]
    if len(present) > 1:
        raise MalformedDeltaError(
            "ambiguous_insert",
            f"Insert has more than one kind: {', '.join(present)}",
            path,
        )
    if not present:
        return Embed(copy.deepcopy(dict(value)))

    kind = present[0]
    body = value[kind]
    extra = {k: copy.deepcopy(v) for k, v in value.items() if k != kind}

    if kind == "text":
        if not isinstance(body, str):
            # Only a string text field is a boxed run.
            return Embed(copy.deepcopy(dict(value)))
        return BoxedText(body, extra=extra)
    if kind == "image":
        if body is not None and not isinstance(body, str):
            raise MalformedDeltaError("invalid_image", "Image URL must be a string", path)
        return Image(body, extra=extra)
    if kind == "video":
        if not isinstance(body, str):
            raise MalformedDeltaError("invalid_video", "Video URL must be a string", path)
        return Video(body, extra=extra)
    if kind == "fileBlot":
        if not isinstance(body, Mapping) or not isinstance(body.get("href"), str):
            raise MalformedDeltaError(
                "invalid_file_blot", "fileBlot must carry a string href", path
            )
        return FileBlot(
            href=body["href"],
            file_name=body.get("fileName", ""),
            file_type=body.get("fileType"),
            extra=extra,
        )
    if not isinstance(body, Mapping):
        raise MalformedDeltaError("invalid_mention", "Mention must be a mapping", path)
    return Mention(data=copy.deepcopy(dict(body)), extra=extra)


# --- Delta helpers ---


def raw_ops(delta: Any) -> list[Any]:
    """Unwrap ``{"ops": [...]}`` or a bare sequence into a list of raw ops."""
    if isinstance(delta, Mapping):
        if "ops" not in delta:
            raise MalformedDeltaError("missing_ops", "Delta mapping has no ops")
        delta = delta["ops"]
    if isinstance(delta, (str, bytes)) or not isinstance(delta, (list, tuple)):
        raise MalformedDeltaError("invalid_delta", "Delta must be a sequence of ops")
    return list(delta)


def iter_ops(delta: Any) -> Iterator[Op]:
    """Yield typed Ops in document order. Raises MalformedDeltaError."""
    for i, item in enumerate(raw_ops(delta)):
        yield Op.from_dict(item, path=f"ops[{i}]")


def parse_delta(delta: Any) -> list[Op]:
    """Parse a whole Delta strictly."""
    return list(iter_ops(delta))


def dump_delta(ops: list[Op]) -> list[dict[str, Any]]:
    """Convert typed Ops back to a bare wire list."""
    return [op.to_dict() for op in ops]
