"""
Media component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Errors ---


@dataclass(frozen=True)
class MediaError:
    """Media classification error."""

    code: str
    message: str
    path: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ClassifyDeltaInput:
    """Input for classifying the image inserts of a raw Delta."""

    delta: Any


@dataclass(frozen=True)
class ClassifyUrlInput:
    """Input for classifying a single resource URL."""

    url: str


# --- Output Models ---


@dataclass(frozen=True)
class ClassifyDeltaOutput:
    """Output with the classified Delta."""

    delta: list[Any] | None
    errors: list[MediaError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ClassifyUrlOutput:
    """Output with the media kind ("image", "video", "file") or None."""

    kind: str | None
    errors: list[MediaError] = field(default_factory=list)
    success: bool = True
