from collections.abc import Callable
from threading import Lock
from typing import Any

from src.ports.editor import EditorPort


class LazyEditor:
    """
    Editor handle built on first use and reused afterwards.

    The handle is owned by whoever creates it (an app, a CLI run, a test);
    there is no process-wide instance.
    """

    def __init__(self, factory: Callable[[], EditorPort]):
        self._factory = factory
        self._editor: EditorPort | None = None
        self._lock = Lock()

    @property
    def initialized(self) -> bool:
        return self._editor is not None

    def get(self) -> EditorPort:
        if self._editor is None:
            with self._lock:
                if self._editor is None:
                    self._editor = self._factory()
        return self._editor

    def html_to_delta(self, html: str) -> list[dict[str, Any]]:
        return self.get().html_to_delta(html)

    def text_to_delta(self, text: str) -> dict[str, Any]:
        return self.get().text_to_delta(text)
