from typing import Any, Protocol


class EditorPort(Protocol):
    def html_to_delta(self, html: str) -> list[dict[str, Any]]:
        """Convert a pasted HTML fragment into raw, unclassified ops."""
        ...

    def text_to_delta(self, text: str) -> dict[str, Any]:
        """Build a Delta holding a single plain-text run."""
        ...
