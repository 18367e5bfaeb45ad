"""
Ingest component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class IngestError:
    """Ingestion error."""

    code: str
    message: str
    path: str | None = None


@dataclass(frozen=True)
class HtmlToDeltaInput:
    """Input for converting pasted HTML into a Delta."""

    html: str


@dataclass(frozen=True)
class TextToDeltaInput:
    """Input for wrapping plain text in a Delta."""

    text: str


@dataclass(frozen=True)
class IngestOutput:
    """Output with the new Delta."""

    delta: Any
    errors: list[IngestError] = field(default_factory=list)
    success: bool = True
