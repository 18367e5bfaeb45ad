"""
Extract component - image and file URL extraction.
"""

from ._impl import extract_files, extract_images
from .component import run, run_extract
from .models import ExtractError, ExtractInput, ExtractKind, ExtractOutput

__all__ = [
    "run",
    "run_extract",
    "ExtractError",
    "ExtractInput",
    "ExtractKind",
    "ExtractOutput",
    "extract_files",
    "extract_images",
]
