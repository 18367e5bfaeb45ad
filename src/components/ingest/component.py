"""
Ingest component - build canonical Deltas from text and HTML.

Invariants:
- I1: HTML results are always classified before being returned
- I2: Text Deltas hold a single newline-terminated run
"""

from __future__ import annotations

from src.components.media.component import _build_config, _build_mime
from src.domain.delta import MalformedDeltaError

from ._impl import convert_html_to_delta, convert_text_to_delta
from .models import HtmlToDeltaInput, IngestError, IngestOutput, TextToDeltaInput
from .ports import EditorPort, MediaRulesPort, MimeLookupPort

# --- Component Entry Points ---


def run_html_to_delta(
    inp: HtmlToDeltaInput,
    *,
    editor: EditorPort,
    rules: MediaRulesPort | None = None,
    mime: MimeLookupPort | None = None,
) -> IngestOutput:
    """
    Convert pasted HTML into a classified Delta.

    Args:
        inp: Input containing the HTML fragment.
        editor: Editor port producing raw ops.
        rules: Optional media rules port.
        mime: Optional MIME lookup port.

    Returns:
        IngestOutput with a bare op list.
    """
    try:
        delta = convert_html_to_delta(
            inp.html, editor, _build_config(rules), _build_mime(rules, mime)
        )
    except MalformedDeltaError as e:
        return IngestOutput(
            delta=None,
            errors=[IngestError(code=e.code, message=e.message, path=e.path)],
            success=False,
        )

    return IngestOutput(delta=delta)


def run_text_to_delta(
    inp: TextToDeltaInput,
    *,
    editor: EditorPort | None = None,
) -> IngestOutput:
    """Wrap plain text in a Delta."""
    return IngestOutput(delta=convert_text_to_delta(inp.text, editor))


def run(
    inp: HtmlToDeltaInput | TextToDeltaInput,
    *,
    editor: EditorPort,
    rules: MediaRulesPort | None = None,
    mime: MimeLookupPort | None = None,
) -> IngestOutput:
    """
    Main entry point for the ingest component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, HtmlToDeltaInput):
        return run_html_to_delta(inp, editor=editor, rules=rules, mime=mime)
    elif isinstance(inp, TextToDeltaInput):
        return run_text_to_delta(inp, editor=editor)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
