"""
Ingest component - Delta construction from plain text and pasted HTML.
"""

from ._impl import convert_html_to_delta, convert_text_to_delta, text_to_delta
from .component import run, run_html_to_delta, run_text_to_delta
from .models import HtmlToDeltaInput, IngestError, IngestOutput, TextToDeltaInput
from .ports import EditorPort

__all__ = [
    "run",
    "run_html_to_delta",
    "run_text_to_delta",
    "HtmlToDeltaInput",
    "IngestError",
    "IngestOutput",
    "TextToDeltaInput",
    "EditorPort",
    "convert_html_to_delta",
    "convert_text_to_delta",
    "text_to_delta",
]
