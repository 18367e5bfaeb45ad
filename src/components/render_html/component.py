"""
HTML render component - project a Delta into HTML.

Invariants:
- I1: Text is escaped before any markup is added
- I2: Attribute precedence is strike, bold/color, link
- I3: Rendering never mutates the input Delta
- I4: Malformed ops are skipped, never raised
"""

from __future__ import annotations

from src.domain.delta import MalformedDeltaError

from ._impl import (
    DEFAULT_CONFIG,
    HtmlConfig,
    render_attributes,
    render_delta,
    render_embed_full,
    render_embed_without_file_blot,
)
from .models import (
    HtmlOutput,
    RenderHtmlError,
    RenderTextRunInput,
    ToHtmlInput,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> HtmlConfig:
    """Build HTML config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return HtmlConfig(
        link_attribute=rules.get_link_attribute(),
        line_break=rules.get_line_break(),
    )


def _convert_errors(errors: list[MalformedDeltaError]) -> list[RenderHtmlError]:
    return [RenderHtmlError(code=e.code, message=e.message, path=e.path) for e in errors]


# --- Component Entry Points ---


def run_to_html(
    inp: ToHtmlInput,
    *,
    rules: RulesPort | None = None,
) -> HtmlOutput:
    """
    Render a Delta to HTML.

    Args:
        inp: Input containing the Delta and the variant flag.
        rules: Optional rules port for configuration.

    Returns:
        HtmlOutput with the markup and any skipped-op errors.
    """
    config = _build_config(rules)
    render_embed = render_embed_full if inp.expand_file_links else render_embed_without_file_blot
    html, errors = render_delta(inp.delta, render_embed, config)

    return HtmlOutput(html=html, errors=_convert_errors(errors), success=True)


def run_render_text_run(
    inp: RenderTextRunInput,
    *,
    rules: RulesPort | None = None,
) -> HtmlOutput:
    """Render one text run through the attribute renderer."""
    return HtmlOutput(html=render_attributes(inp.text, inp.attributes, _build_config(rules)))


def run(
    inp: ToHtmlInput | RenderTextRunInput,
    *,
    rules: RulesPort | None = None,
) -> HtmlOutput:
    """
    Main entry point for the HTML render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ToHtmlInput):
        return run_to_html(inp, rules=rules)
    elif isinstance(inp, RenderTextRunInput):
        return run_render_text_run(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
