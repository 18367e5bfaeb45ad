"""
Extract component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

ExtractKind = Literal["images", "files"]


@dataclass(frozen=True)
class ExtractError:
    """Extraction error."""

    code: str
    message: str
    path: str | None = None


@dataclass(frozen=True)
class ExtractInput:
    """Input for extracting media URLs from a Delta."""

    delta: Any
    kind: ExtractKind = "images"


@dataclass(frozen=True)
class ExtractOutput:
    """Output with extracted URLs."""

    urls: list[str] = field(default_factory=list)
    errors: list[ExtractError] = field(default_factory=list)
    success: bool = True
