"""
Ingest component port definitions.
"""

from __future__ import annotations

from src.components.media.ports import MimeLookupPort
from src.components.media.ports import RulesPort as MediaRulesPort
from src.ports.editor import EditorPort

__all__ = ["EditorPort", "MediaRulesPort", "MimeLookupPort"]
