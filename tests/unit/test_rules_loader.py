"""
Rules file loading and validation tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.rules import RulesAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules


MINIMAL = """
project:
  slug: test
  rules_version: "1.0"
"""


def _write(tmp_path: Path, content: str, name: str = "rules.yaml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadRules:
    def test_project_rules_file(self, project_root: Path) -> None:
        rules = load_rules(project_root / "rules.yaml")

        assert rules.project.slug == "delta-bridge"
        assert "png" in rules.media.image_extensions
        assert "rmvb" in rules.media.video_extensions
        assert rules.html.link_attribute == "herf"
        assert rules.plaintext.media_open == "!["

    def test_minimal_uses_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(_write(tmp_path, MINIMAL))

        assert rules.media.image_extensions == ["jpg", "jpeg", "png"]
        assert rules.media.allowed_schemes == ["http", "https"]
        assert rules.media.case_insensitive_extensions is False
        assert rules.html.line_break == "<br>"
        assert rules.plaintext.mention_prefix == "@"

    def test_fenced_yaml(self, tmp_path: Path) -> None:
        content = (
            "# Rules\n\nSome prose.\n\n```yaml"
            + MINIMAL
            + "html:\n  link_attribute: href\n```\n"
        )
        rules = load_rules(_write(tmp_path, content, "rules.md"))

        assert rules.html.link_attribute == "href"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "absent.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="empty"):
            load_rules(_write(tmp_path, ""))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(_write(tmp_path, "project: [unclosed"))

    def test_unknown_section_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(_write(tmp_path, MINIMAL + "extras:\n  a: 1\n"))

    def test_missing_project_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(_write(tmp_path, "media:\n  image_extensions: [png]\n"))


class TestRulesAdapter:
    @pytest.fixture
    def adapter(self) -> RulesAdapter:
        return RulesAdapter(
            Rules.model_validate(
                {
                    "project": {"slug": "t", "rules_version": "1"},
                    "media": {
                        "image_extensions": ["png"],
                        "video_extensions": ["mp4", "mp4"],
                        "allowed_schemes": ["HTTPS"],
                        "mime_overrides": {"bin": "application/x-bin"},
                    },
                    "html": {"link_attribute": "href", "line_break": "<br/>"},
                    "plaintext": {"media_open": "[", "media_close": "]", "mention_prefix": "#"},
                }
            )
        )

    def test_media_getters(self, adapter: RulesAdapter) -> None:
        assert adapter.get_image_extensions() == frozenset(["png"])
        assert adapter.get_video_extensions() == frozenset(["mp4"])
        assert adapter.get_case_insensitive_extensions() is False
        assert adapter.get_allowed_schemes() == frozenset(["https"])
        assert adapter.get_mime_overrides() == {"bin": "application/x-bin"}

    def test_mime_overrides_are_a_copy(self, adapter: RulesAdapter) -> None:
        adapter.get_mime_overrides()["bin"] = "changed"
        assert adapter.get_mime_overrides() == {"bin": "application/x-bin"}

    def test_render_getters(self, adapter: RulesAdapter) -> None:
        assert adapter.get_link_attribute() == "href"
        assert adapter.get_line_break() == "<br/>"
        assert adapter.get_media_open() == "["
        assert adapter.get_media_close() == "]"
        assert adapter.get_mention_prefix() == "#"
