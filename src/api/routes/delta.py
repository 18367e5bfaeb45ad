"""
Delta conversion API routes.

Endpoints:
- POST /html       Delta -> HTML (full or without file blots)
- POST /text       Delta -> plain text with media placeholders
- POST /pure-text  Delta -> bare text for indexing
- POST /classify   raw Delta -> classified Delta
- POST /from-html  pasted HTML -> classified Delta
- POST /from-text  plain text -> Delta
- POST /v2, /v1    schema migration
- POST /images, /files  URL extraction

Migration and extraction reject malformed Deltas with 422; the render
endpoints always answer and list skipped ops instead.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.adapters.editor_handle import LazyEditor
from src.adapters.mime import MimetypesLookup
from src.adapters.rules import RulesAdapter
from src.api.deps import get_editor, get_mime, get_rules_port
from src.components.extract import ExtractInput, run_extract
from src.components.ingest import (
    HtmlToDeltaInput,
    TextToDeltaInput,
    run_html_to_delta,
    run_text_to_delta,
)
from src.components.media import ClassifyDeltaInput, run_classify
from src.components.render_html import ToHtmlInput, run_to_html
from src.components.render_text import (
    ToPlainTextInput,
    ToPureTextInput,
    run_to_plain_text,
    run_to_pure_text,
)
from src.components.schema import MigrateInput, run_migrate

router = APIRouter()


# --- Request/Response Models ---


class DeltaRequest(BaseModel):
    """A Delta as a bare op list or {"ops": [...]}."""

    delta: Any = Field(..., description="Delta document")


class HtmlRequest(DeltaRequest):
    """Request to render a Delta as HTML."""

    expand_file_links: bool = Field(default=True, description="Render file blots as images")


class HtmlFragmentRequest(BaseModel):
    """Pasted HTML fragment."""

    html: str


class TextRequest(BaseModel):
    """Plain text body."""

    text: str


class SkippedOp(BaseModel):
    """An op left out of a rendering."""

    code: str
    message: str
    path: str | None = None


class HtmlResponse(BaseModel):
    html: str
    skipped: list[SkippedOp] = []


class TextResponse(BaseModel):
    text: str
    skipped: list[SkippedOp] = []


class DeltaResponse(BaseModel):
    ops: list[Any]


class UrlsResponse(BaseModel):
    urls: list[str]


def _unprocessable(errors: list[Any]) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=[{"code": e.code, "message": e.message, "path": e.path} for e in errors],
    )


# --- Render Routes ---


@router.post("/html", response_model=HtmlResponse)
def render_html(
    request: HtmlRequest,
    rules: RulesAdapter = Depends(get_rules_port),
) -> HtmlResponse:
    """Render a Delta to HTML."""
    result = run_to_html(
        ToHtmlInput(delta=request.delta, expand_file_links=request.expand_file_links),
        rules=rules,
    )
    return HtmlResponse(
        html=result.html,
        skipped=[SkippedOp(code=e.code, message=e.message, path=e.path) for e in result.errors],
    )


@router.post("/text", response_model=TextResponse)
def render_plain_text(
    request: DeltaRequest,
    rules: RulesAdapter = Depends(get_rules_port),
) -> TextResponse:
    """Project a Delta to plain text with media placeholders."""
    result = run_to_plain_text(ToPlainTextInput(delta=request.delta), rules=rules)
    return TextResponse(
        text=result.text,
        skipped=[SkippedOp(code=e.code, message=e.message, path=e.path) for e in result.errors],
    )


@router.post("/pure-text", response_model=TextResponse)
def render_pure_text(request: DeltaRequest) -> TextResponse:
    """Project a Delta to bare text for search indexing."""
    return TextResponse(text=run_to_pure_text(ToPureTextInput(delta=request.delta)).text)


# --- Ingest Routes ---


@router.post("/classify", response_model=DeltaResponse)
def classify(
    request: DeltaRequest,
    rules: RulesAdapter = Depends(get_rules_port),
    mime: MimetypesLookup = Depends(get_mime),
) -> DeltaResponse:
    """Classify hosted image inserts into image, video or file ops."""
    result = run_classify(ClassifyDeltaInput(delta=request.delta), rules=rules, mime=mime)
    if not result.success or result.delta is None:
        raise _unprocessable(result.errors)
    return DeltaResponse(ops=result.delta)


@router.post("/from-html", response_model=DeltaResponse)
def from_html(
    request: HtmlFragmentRequest,
    editor: LazyEditor = Depends(get_editor),
    rules: RulesAdapter = Depends(get_rules_port),
    mime: MimetypesLookup = Depends(get_mime),
) -> DeltaResponse:
    """Convert pasted HTML into a classified Delta."""
    result = run_html_to_delta(
        HtmlToDeltaInput(html=request.html), editor=editor, rules=rules, mime=mime
    )
    if not result.success:
        raise _unprocessable(result.errors)
    return DeltaResponse(ops=result.delta)


@router.post("/from-text", response_model=DeltaResponse)
def from_text(request: TextRequest) -> DeltaResponse:
    """Wrap plain text in a Delta."""
    result = run_text_to_delta(TextToDeltaInput(text=request.text))
    return DeltaResponse(ops=result.delta["ops"])


# --- Schema Routes ---


@router.post("/v2", response_model=DeltaResponse)
def migrate_to_v2(request: DeltaRequest) -> DeltaResponse:
    """Box text runs (v1 -> v2)."""
    result = run_migrate(MigrateInput(delta=request.delta, target_version=2))
    if not result.success or result.delta is None:
        raise _unprocessable(result.errors)
    return DeltaResponse(ops=result.delta)


@router.post("/v1", response_model=DeltaResponse)
def migrate_to_v1(request: DeltaRequest) -> DeltaResponse:
    """Unbox text runs and clear null images (v2 -> v1)."""
    result = run_migrate(MigrateInput(delta=request.delta, target_version=1))
    if not result.success or result.delta is None:
        raise _unprocessable(result.errors)
    return DeltaResponse(ops=result.delta)


# --- Extraction Routes ---


@router.post("/images", response_model=UrlsResponse)
def images(request: DeltaRequest) -> UrlsResponse:
    """Image URLs in document order."""
    result = run_extract(ExtractInput(delta=request.delta, kind="images"))
    if not result.success:
        raise _unprocessable(result.errors)
    return UrlsResponse(urls=result.urls)


@router.post("/files", response_model=UrlsResponse)
def files(request: DeltaRequest) -> UrlsResponse:
    """File blot hrefs in document order."""
    result = run_extract(ExtractInput(delta=request.delta, kind="files"))
    if not result.success:
        raise _unprocessable(result.errors)
    return UrlsResponse(urls=result.urls)
