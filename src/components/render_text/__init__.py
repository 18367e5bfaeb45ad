"""
Plain text render component - Delta to preview text and index text.
"""

from ._impl import (
    DEFAULT_CONFIG,
    PlainTextConfig,
    plain_text_parts,
    render_plain_insert,
    to_plain_text,
    to_pure_text,
)
from .component import (
    run,
    run_to_plain_text,
    run_to_pure_text,
)
from .models import (
    RenderTextError,
    TextOutput,
    ToPlainTextInput,
    ToPureTextInput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_to_plain_text",
    "run_to_pure_text",
    # Input models
    "ToPlainTextInput",
    "ToPureTextInput",
    # Output models
    "RenderTextError",
    "TextOutput",
    # Ports
    "RulesPort",
    # _impl
    "DEFAULT_CONFIG",
    "PlainTextConfig",
    "plain_text_parts",
    "render_plain_insert",
    "to_plain_text",
    "to_pure_text",
]
