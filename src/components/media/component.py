"""
Media component - classify hosted resources in a raw Delta.

Invariants:
- I1: jpg/jpeg/png image inserts are left unchanged
- I2: Known video extensions become {"video": url}
- I3: Everything else hosted becomes a fileBlot with fileSize null
- I4: Non-hosted and unparseable URLs pass through unchanged
"""

from __future__ import annotations

from src.adapters.mime import MimetypesLookup
from src.domain.delta import MalformedDeltaError

from ._impl import (
    DEFAULT_CONFIG,
    MediaConfig,
    classify_delta,
    classify_url,
)
from .models import (
    ClassifyDeltaInput,
    ClassifyDeltaOutput,
    ClassifyUrlInput,
    ClassifyUrlOutput,
    MediaError,
)
from .ports import MimeLookupPort, RulesPort


def _build_config(rules: RulesPort | None) -> MediaConfig:
    """Build media config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return MediaConfig(
        image_extensions=rules.get_image_extensions(),
        video_extensions=rules.get_video_extensions(),
        case_insensitive_extensions=rules.get_case_insensitive_extensions(),
        allowed_schemes=rules.get_allowed_schemes(),
    )


def _build_mime(rules: RulesPort | None, mime: MimeLookupPort | None) -> MimeLookupPort | None:
    """Pick the MIME lookup: explicit port, else one seeded with rule overrides."""
    if mime is not None:
        return mime
    if rules is None:
        return None
    return MimetypesLookup(rules.get_mime_overrides())


# --- Component Entry Points ---


def run_classify(
    inp: ClassifyDeltaInput,
    *,
    rules: RulesPort | None = None,
    mime: MimeLookupPort | None = None,
) -> ClassifyDeltaOutput:
    """
    Classify every hosted image insert of a Delta.

    Args:
        inp: Input containing the raw Delta.
        rules: Optional rules port for configuration.
        mime: Optional MIME lookup port.

    Returns:
        ClassifyDeltaOutput with a new, classified op list.
    """
    config = _build_config(rules)
    try:
        delta = classify_delta(inp.delta, config, _build_mime(rules, mime))
    except MalformedDeltaError as e:
        return ClassifyDeltaOutput(
            delta=None,
            errors=[MediaError(code=e.code, message=e.message, path=e.path)],
            success=False,
        )

    return ClassifyDeltaOutput(delta=delta, errors=[], success=True)


def run_classify_url(
    inp: ClassifyUrlInput,
    *,
    rules: RulesPort | None = None,
) -> ClassifyUrlOutput:
    """Classify a single URL without building an op."""
    return ClassifyUrlOutput(kind=classify_url(inp.url, _build_config(rules)))


def run(
    inp: ClassifyDeltaInput | ClassifyUrlInput,
    *,
    rules: RulesPort | None = None,
    mime: MimeLookupPort | None = None,
) -> ClassifyDeltaOutput | ClassifyUrlOutput:
    """
    Main entry point for the media component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ClassifyDeltaInput):
        return run_classify(inp, rules=rules, mime=mime)
    elif isinstance(inp, ClassifyUrlInput):
        return run_classify_url(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
