"""
Media component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing media classification rules."""

    def get_image_extensions(self) -> frozenset[str]:
        """Get extensions kept as images."""
        ...

    def get_video_extensions(self) -> frozenset[str]:
        """Get extensions rewritten to video inserts."""
        ...

    def get_case_insensitive_extensions(self) -> bool:
        """Whether extension matching ignores case."""
        ...

    def get_allowed_schemes(self) -> frozenset[str]:
        """Get URL schemes that mark an image as externally hosted."""
        ...

    def get_mime_overrides(self) -> dict[str, str]:
        """Get extension to MIME type overrides."""
        ...


class MimeLookupPort(Protocol):
    """Port for resolving a file name to a MIME type."""

    def guess_type(self, file_name: str) -> str | None:
        """Return the MIME type, or None when unresolved."""
        ...
