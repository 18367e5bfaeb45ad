"""
Ingest component unit tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from src.adapters.html_editor import HtmlClipboardEditor
from src.components.ingest import (
    HtmlToDeltaInput,
    TextToDeltaInput,
    convert_html_to_delta,
    convert_text_to_delta,
    run,
    run_html_to_delta,
    run_text_to_delta,
    text_to_delta,
)

# --- Fixtures ---


class FakeEditor:
    """Editor returning canned ops and recording its calls."""

    def __init__(self, ops: Any = None) -> None:
        self.ops = ops if ops is not None else []
        self.html_calls: list[str] = []
        self.text_calls: list[str] = []

    def html_to_delta(self, html: str) -> Any:
        self.html_calls.append(html)
        return self.ops

    def text_to_delta(self, text: str) -> dict[str, Any]:
        self.text_calls.append(text)
        return {"ops": [{"insert": f"[{text}]\n"}]}


class MockRules:
    def get_image_extensions(self) -> frozenset[str]:
        return frozenset(["png"])

    def get_video_extensions(self) -> frozenset[str]:
        return frozenset(["webm"])

    def get_case_insensitive_extensions(self) -> bool:
        return False

    def get_allowed_schemes(self) -> frozenset[str]:
        return frozenset(["https"])

    def get_mime_overrides(self) -> dict[str, str]:
        return {}


class MockMime:
    def guess_type(self, file_name: str) -> str | None:
        return "application/octet-stream"


@pytest.fixture
def editor() -> HtmlClipboardEditor:
    return HtmlClipboardEditor()


# --- Text ---


class TestTextToDelta:
    def test_appends_newline(self) -> None:
        assert text_to_delta("hi") == {"ops": [{"insert": "hi\n"}]}

    def test_keeps_existing_newline(self) -> None:
        assert text_to_delta("hi\n") == {"ops": [{"insert": "hi\n"}]}

    def test_empty(self) -> None:
        assert text_to_delta("") == {"ops": [{"insert": "\n"}]}
        assert text_to_delta(None) == {"ops": [{"insert": "\n"}]}

    def test_editor_used_when_given(self) -> None:
        fake = FakeEditor()
        assert convert_text_to_delta("a", fake) == {"ops": [{"insert": "[a]\n"}]}
        assert fake.text_calls == ["a"]


# --- HTML ---


class TestHtmlToDelta:
    def test_paste_is_classified(self, editor: HtmlClipboardEditor) -> None:
        html = (
            "<p>Hello <strong>world</strong></p>"
            '<img src="https://e.com/a.mp4"><img src="https://e.com/b.png">'
        )

        assert convert_html_to_delta(html, editor) == [
            {"insert": "Hello "},
            {"insert": "world", "attributes": {"bold": True}},
            {"insert": "\n"},
            {"insert": {"video": "https://e.com/a.mp4"}},
            {"insert": {"image": "https://e.com/b.png"}},
            {"insert": "\n"},
        ]

    def test_file_link_becomes_file_blot(self, editor: HtmlClipboardEditor) -> None:
        delta = convert_html_to_delta(
            '<img src="https://e.com/docs/report.pdf?v=2">', editor, mime=MockMime()
        )

        assert delta[0] == {
            "insert": {
                "fileBlot": {
                    "href": "https://e.com/docs/report.pdf?v=2",
                    "fileName": "report.pdf",
                    "fileSize": None,
                    "fileType": "application/octet-stream",
                }
            },
            "attributes": {"size": ""},
        }

    def test_editor_output_classified(self) -> None:
        fake = FakeEditor([{"insert": {"image": "https://e.com/v.mp4"}}])
        assert convert_html_to_delta("<x>", fake) == [{"insert": {"video": "https://e.com/v.mp4"}}]
        assert fake.html_calls == ["<x>"]


# --- Component Entry Points ---


class TestComponent:
    def test_run_html_to_delta_with_rules(self, editor: HtmlClipboardEditor) -> None:
        html = '<img src="https://e.com/a.webm"><img src="http://e.com/b.webm">'
        result = run_html_to_delta(HtmlToDeltaInput(html=html), editor=editor, rules=MockRules())

        assert result.success is True
        assert result.delta[0] == {"insert": {"video": "https://e.com/a.webm"}}
        # http is not an allowed scheme here
        assert result.delta[1] == {"insert": {"image": "http://e.com/b.webm"}}

    def test_run_html_to_delta_malformed_editor_output(self) -> None:
        result = run_html_to_delta(HtmlToDeltaInput(html=""), editor=FakeEditor("not ops"))

        assert result.success is False
        assert result.delta is None
        assert result.errors[0].code == "invalid_delta"

    def test_run_text_to_delta(self) -> None:
        result = run_text_to_delta(TextToDeltaInput(text="note"))
        assert result.delta == {"ops": [{"insert": "note\n"}]}

    def test_run_dispatch(self, editor: HtmlClipboardEditor) -> None:
        html = run(HtmlToDeltaInput(html="a<br>b"), editor=editor)
        text = run(TextToDeltaInput(text="t"), editor=editor)

        assert html.delta == [{"insert": "a\nb\n"}]
        assert text.delta == {"ops": [{"insert": "t\n"}]}

    def test_run_unknown_input(self, editor: HtmlClipboardEditor) -> None:
        with pytest.raises(ValueError):
            run("html", editor=editor)  # type: ignore[arg-type]
