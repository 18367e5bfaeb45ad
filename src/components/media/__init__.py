"""
Media component - hosted resource classification (image / video / file).
"""

from ._impl import (
    DEFAULT_CONFIG,
    HostedUrl,
    MediaConfig,
    MediaKind,
    classify_delta,
    classify_op,
    classify_raw_op,
    classify_url,
    parse_hosted_url,
)
from .component import (
    run,
    run_classify,
    run_classify_url,
)
from .models import (
    ClassifyDeltaInput,
    ClassifyDeltaOutput,
    ClassifyUrlInput,
    ClassifyUrlOutput,
    MediaError,
)
from .ports import MimeLookupPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_classify",
    "run_classify_url",
    # Input models
    "ClassifyDeltaInput",
    "ClassifyUrlInput",
    # Output models
    "ClassifyDeltaOutput",
    "ClassifyUrlOutput",
    "MediaError",
    # Ports
    "MimeLookupPort",
    "RulesPort",
    # _impl
    "DEFAULT_CONFIG",
    "HostedUrl",
    "MediaConfig",
    "MediaKind",
    "classify_delta",
    "classify_op",
    "classify_raw_op",
    "classify_url",
    "parse_hosted_url",
]
