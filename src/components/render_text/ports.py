"""
Plain text render component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing plain text placeholder rules."""

    def get_media_open(self) -> str:
        """Get the marker opening a media placeholder."""
        ...

    def get_media_close(self) -> str:
        """Get the marker closing a media placeholder."""
        ...

    def get_mention_prefix(self) -> str:
        """Get the prefix written before a mention value."""
        ...
