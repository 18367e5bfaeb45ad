"""
HTML render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Errors ---


@dataclass(frozen=True)
class RenderHtmlError:
    """An op skipped while rendering."""

    code: str
    message: str
    path: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ToHtmlInput:
    """Input for rendering a Delta to HTML."""

    delta: Any
    # False selects the variant that hides file blots and strips queries.
    expand_file_links: bool = True


@dataclass(frozen=True)
class RenderTextRunInput:
    """Input for rendering a single attributed text run."""

    text: str
    attributes: dict[str, Any] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class HtmlOutput:
    """Output with rendered HTML."""

    html: str
    errors: list[RenderHtmlError] = field(default_factory=list)
    success: bool = True
