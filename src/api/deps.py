import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from src.adapters.editor_handle import LazyEditor
from src.adapters.html_editor import HtmlClipboardEditor
from src.adapters.mime import MimetypesLookup
from src.adapters.rules import RulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("DELTA_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


def get_rules_port(rules: Rules = Depends(get_rules)) -> RulesAdapter:
    return RulesAdapter(rules)


def get_mime(rules: Rules = Depends(get_rules)) -> MimetypesLookup:
    return MimetypesLookup(rules.media.mime_overrides)


# --- Editor ---
def get_editor(request: Request) -> LazyEditor:
    """Editor handle owned by the running app; built on first use."""
    editor = getattr(request.app.state, "editor", None)
    if editor is None:
        editor = LazyEditor(HtmlClipboardEditor)
        request.app.state.editor = editor
    return editor
