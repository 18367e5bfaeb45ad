"""
Extract component unit tests.
"""

from __future__ import annotations

import pytest

from src.components.extract import (
    ExtractInput,
    extract_files,
    extract_images,
    run,
    run_extract,
)
from src.domain.delta import MalformedDeltaError


def _file(href: str) -> dict:
    return {
        "insert": {
            "fileBlot": {"href": href, "fileName": "", "fileSize": None, "fileType": None}
        },
        "attributes": {"size": ""},
    }


@pytest.fixture
def delta() -> list[dict]:
    return [
        {"insert": {"image": "https://e.com/1.png"}},
        {"insert": "text\n"},
        _file("https://e.com/a.pdf"),
        {"insert": {"image": ""}},
        {"insert": {"image": None}},
        {"insert": {"video": "https://e.com/v.mp4"}},
        {"insert": {"image": "https://e.com/2.jpg"}},
        _file(""),
        _file("https://e.com/b.zip"),
    ]


class TestExtractImages:
    def test_order_and_no_empties(self, delta: list[dict]) -> None:
        assert extract_images(delta) == ["https://e.com/1.png", "https://e.com/2.jpg"]

    def test_videos_not_images(self) -> None:
        assert extract_images([{"insert": {"video": "https://e.com/v.mp4"}}]) == []

    def test_duplicates_kept(self) -> None:
        delta = [{"insert": {"image": "u"}}, {"insert": {"image": "u"}}]
        assert extract_images(delta) == ["u", "u"]

    def test_ops_wrapper(self) -> None:
        assert extract_images({"ops": [{"insert": {"image": "u"}}]}) == ["u"]

    def test_malformed_raises(self) -> None:
        with pytest.raises(MalformedDeltaError):
            extract_images([{"insert": {"image": 12}}])


class TestExtractFiles:
    def test_order_and_no_empties(self, delta: list[dict]) -> None:
        assert extract_files(delta) == ["https://e.com/a.pdf", "https://e.com/b.zip"]

    def test_empty_delta(self) -> None:
        assert extract_files([]) == []

    def test_malformed_raises(self) -> None:
        with pytest.raises(MalformedDeltaError):
            extract_files(None)


# --- Component Entry Points ---


class TestComponent:
    def test_run_extract_kinds(self, delta: list[dict]) -> None:
        images = run_extract(ExtractInput(delta=delta))
        files = run_extract(ExtractInput(delta=delta, kind="files"))

        assert images.urls == ["https://e.com/1.png", "https://e.com/2.jpg"]
        assert files.urls == ["https://e.com/a.pdf", "https://e.com/b.zip"]

    def test_run_extract_malformed(self) -> None:
        result = run_extract(ExtractInput(delta=[{"insert": True}]))

        assert result.success is False
        assert result.urls == []
        assert result.errors[0].code == "invalid_insert"
        assert result.errors[0].path == "ops[0].insert"

    def test_run_extract_unknown_kind(self) -> None:
        result = run_extract(ExtractInput(delta=[], kind="videos"))  # type: ignore[arg-type]

        assert result.success is False
        assert result.errors[0].code == "unknown_kind"

    def test_run_dispatch(self) -> None:
        assert run(ExtractInput(delta=[])).success is True

        with pytest.raises(ValueError):
            run({"delta": []})  # type: ignore[arg-type]
