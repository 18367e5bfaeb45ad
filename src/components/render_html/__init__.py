"""
HTML render component - Delta to HTML, with and without file blots.
"""

from ._impl import (
    DEFAULT_CONFIG,
    HtmlConfig,
    color_style,
    delta_to_html,
    delta_to_html_without_file_blot,
    encode_uri,
    escape_html,
    render_attributes,
    render_delta,
    render_embed_full,
    render_embed_without_file_blot,
    render_mention,
    strip_query,
)
from .component import (
    run,
    run_render_text_run,
    run_to_html,
)
from .models import (
    HtmlOutput,
    RenderHtmlError,
    RenderTextRunInput,
    ToHtmlInput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render_text_run",
    "run_to_html",
    # Input models
    "RenderTextRunInput",
    "ToHtmlInput",
    # Output models
    "HtmlOutput",
    "RenderHtmlError",
    # Ports
    "RulesPort",
    # _impl
    "DEFAULT_CONFIG",
    "HtmlConfig",
    "color_style",
    "delta_to_html",
    "delta_to_html_without_file_blot",
    "encode_uri",
    "escape_html",
    "render_attributes",
    "render_delta",
    "render_embed_full",
    "render_embed_without_file_blot",
    "render_mention",
    "strip_query",
]
