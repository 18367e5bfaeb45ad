"""
Plain text render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RenderTextError:
    """An op skipped while projecting to text."""

    code: str
    message: str
    path: str | None = None


@dataclass(frozen=True)
class ToPlainTextInput:
    """Input for the placeholder-preserving projection."""

    delta: Any


@dataclass(frozen=True)
class ToPureTextInput:
    """Input for the bare-text projection."""

    delta: Any


@dataclass(frozen=True)
class TextOutput:
    """Output with projected text."""

    text: str
    errors: list[RenderTextError] = field(default_factory=list)
    success: bool = True
