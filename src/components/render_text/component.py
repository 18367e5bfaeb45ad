"""
Plain text render component - project a Delta into text.

Invariants:
- I1: Media becomes a bracketed placeholder, mentions become @value
- I2: Text runs are copied verbatim
- I3: Projection always returns a string
"""

from __future__ import annotations

from ._impl import (
    DEFAULT_CONFIG,
    PlainTextConfig,
    plain_text_parts,
    to_pure_text,
)
from .models import (
    RenderTextError,
    TextOutput,
    ToPlainTextInput,
    ToPureTextInput,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> PlainTextConfig:
    """Build plain text config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return PlainTextConfig(
        media_open=rules.get_media_open(),
        media_close=rules.get_media_close(),
        mention_prefix=rules.get_mention_prefix(),
    )


# --- Component Entry Points ---


def run_to_plain_text(
    inp: ToPlainTextInput,
    *,
    rules: RulesPort | None = None,
) -> TextOutput:
    """
    Project a Delta to plain text with media placeholders.

    Args:
        inp: Input containing the Delta.
        rules: Optional rules port for placeholder markers.

    Returns:
        TextOutput with the text and any skipped-op errors.
    """
    text, errors = plain_text_parts(inp.delta, _build_config(rules))
    return TextOutput(
        text=text,
        errors=[RenderTextError(code=e.code, message=e.message, path=e.path) for e in errors],
        success=True,
    )


def run_to_pure_text(inp: ToPureTextInput) -> TextOutput:
    """Project a Delta to bare text for indexing."""
    return TextOutput(text=to_pure_text(inp.delta))


def run(
    inp: ToPlainTextInput | ToPureTextInput,
    *,
    rules: RulesPort | None = None,
) -> TextOutput:
    """
    Main entry point for the plain text render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ToPlainTextInput):
        return run_to_plain_text(inp, rules=rules)
    elif isinstance(inp, ToPureTextInput):
        return run_to_pure_text(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
