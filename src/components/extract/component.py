"""
Extract component - list image and file URLs of a Delta.

Invariants:
- I1: Document order is preserved
- I2: Empty URLs are never returned
- I3: Malformed input fails loudly (success=False)
"""

from __future__ import annotations

from src.domain.delta import MalformedDeltaError

from ._impl import extract_files, extract_images
from .models import ExtractError, ExtractInput, ExtractOutput

# --- Component Entry Points ---


def run_extract(inp: ExtractInput) -> ExtractOutput:
    """
    Extract image or file URLs from a Delta.

    Args:
        inp: Input containing the Delta and which kind of URL to collect.

    Returns:
        ExtractOutput with URLs, or errors on malformed input.
    """
    if inp.kind == "images":
        extract = extract_images
    elif inp.kind == "files":
        extract = extract_files
    else:
        return ExtractOutput(
            errors=[ExtractError(code="unknown_kind", message=f"Unknown kind: {inp.kind}")],
            success=False,
        )

    try:
        urls = extract(inp.delta)
    except MalformedDeltaError as e:
        return ExtractOutput(
            errors=[ExtractError(code=e.code, message=e.message, path=e.path)],
            success=False,
        )

    return ExtractOutput(urls=urls)


def run(inp: ExtractInput) -> ExtractOutput:
    """Main entry point for the extract component."""
    if isinstance(inp, ExtractInput):
        return run_extract(inp)
    raise ValueError(f"Unknown input type: {type(inp)}")
