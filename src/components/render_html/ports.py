"""
HTML component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing HTML rendering rules."""

    def get_link_attribute(self) -> str:
        """Get the anchor attribute that carries the link target."""
        ...

    def get_line_break(self) -> str:
        """Get the markup used for a converted newline."""
        ...
