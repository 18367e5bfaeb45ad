"""
Tests for the Delta conversion API routes.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.editor_handle import LazyEditor
from src.adapters.mime import MimetypesLookup
from src.adapters.rules import RulesAdapter
from src.api.deps import get_mime, get_rules_port
from src.api.routes import delta

# --- Test Fixtures ---


@pytest.fixture
def app(rules_port: RulesAdapter) -> FastAPI:
    """Create test FastAPI app with the delta router."""
    test_app = FastAPI()
    test_app.include_router(delta.router, prefix="/api/delta")
    test_app.dependency_overrides[get_rules_port] = lambda: rules_port
    test_app.dependency_overrides[get_mime] = lambda: MimetypesLookup(
        rules_port.get_mime_overrides()
    )
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# --- Render ---


class TestRenderRoutes:
    def test_html(self, client: TestClient) -> None:
        body = {"delta": [{"insert": "hi\n", "attributes": {"bold": True, "color": "#ff0000"}}]}
        response = client.post("/api/delta/html", json=body)

        assert response.status_code == 200
        assert response.json() == {
            "html": '<strong style="color: rgb(255, 0, 0);">hi<br></strong>',
            "skipped": [],
        }

    def test_html_without_file_blot(self, client: TestClient) -> None:
        body = {
            "delta": {
                "ops": [
                    {"insert": {"image": "https://e.com/a.png?sig=1"}},
                    {
                        "insert": {
                            "fileBlot": {
                                "href": "https://e.com/a.pdf",
                                "fileName": "a.pdf",
                                "fileSize": None,
                                "fileType": "application/pdf",
                            }
                        }
                    },
                ]
            },
            "expand_file_links": False,
        }
        response = client.post("/api/delta/html", json=body)

        assert response.json()["html"] == '<img src="https://e.com/a.png">'

    def test_html_lists_skipped_ops(self, client: TestClient) -> None:
        response = client.post(
            "/api/delta/html", json={"delta": [{"insert": "a"}, {"retain": 1}]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["html"] == "a"
        assert data["skipped"] == [
            {"code": "missing_insert", "message": "Op has no insert", "path": "ops[1]"}
        ]

    def test_text(self, client: TestClient) -> None:
        response = client.post(
            "/api/delta/text", json={"delta": [{"insert": {"image": "http://x/a.png"}}]}
        )
        assert response.json()["text"] == "![http://x/a.png]!"

    def test_pure_text(self, client: TestClient) -> None:
        body = {
            "delta": [
                {"insert": "\n"},
                {"insert": "a"},
                {"insert": {"mention": {"value": "bob"}}},
            ]
        }
        response = client.post("/api/delta/pure-text", json=body)
        assert response.json() == {"text": "abob", "skipped": []}

    def test_pure_text_malformed_is_empty(self, client: TestClient) -> None:
        response = client.post("/api/delta/pure-text", json={"delta": "garbage"})

        assert response.status_code == 200
        assert response.json()["text"] == ""

    def test_missing_delta_field(self, client: TestClient) -> None:
        response = client.post("/api/delta/html", json={})
        assert response.status_code == 422


# --- Ingest ---


class TestIngestRoutes:
    def test_classify(self, client: TestClient) -> None:
        body = {
            "delta": [
                {"insert": {"image": "https://e.com/v.rmvb"}},
                {"insert": {"image": "https://e.com/a.PNG"}},
            ]
        }
        response = client.post("/api/delta/classify", json=body)

        assert response.status_code == 200
        ops = response.json()["ops"]
        assert ops[0] == {"insert": {"video": "https://e.com/v.rmvb"}}
        # extension matching is case-sensitive by default
        assert ops[1]["insert"]["fileBlot"]["fileName"] == "a.PNG"
        assert ops[1]["insert"]["fileBlot"]["fileSize"] is None
        assert ops[1]["attributes"] == {"size": ""}

    def test_classify_malformed(self, client: TestClient) -> None:
        response = client.post("/api/delta/classify", json={"delta": "not a delta"})

        assert response.status_code == 422
        assert response.json()["detail"][0]["code"] == "invalid_delta"

    def test_from_html(self, app: FastAPI, client: TestClient) -> None:
        response = client.post(
            "/api/delta/from-html",
            json={"html": '<p>hi</p><img src="https://e.com/clip.mkv">'},
        )

        assert response.status_code == 200
        assert response.json()["ops"] == [
            {"insert": "hi\n"},
            {"insert": {"video": "https://e.com/clip.mkv"}},
            {"insert": "\n"},
        ]
        assert isinstance(app.state.editor, LazyEditor)

    def test_from_text(self, client: TestClient) -> None:
        response = client.post("/api/delta/from-text", json={"text": "hi"})
        assert response.json()["ops"] == [{"insert": "hi\n"}]


# --- Schema ---


class TestSchemaRoutes:
    def test_round_trip(self, client: TestClient) -> None:
        v1 = [{"insert": "a", "attributes": {"bold": True}}, {"insert": {"image": "u"}}]

        v2 = client.post("/api/delta/v2", json={"delta": v1}).json()["ops"]
        back = client.post("/api/delta/v1", json={"delta": v2}).json()["ops"]

        assert v2[0] == {"insert": {"text": "a"}, "attributes": {"bold": True}}
        assert back == v1

    def test_v1_null_delta(self, client: TestClient) -> None:
        response = client.post("/api/delta/v1", json={"delta": None})
        assert response.json() == {"ops": []}

    def test_v1_null_image(self, client: TestClient) -> None:
        response = client.post("/api/delta/v1", json={"delta": [{"insert": {"image": None}}]})
        assert response.json() == {"ops": [{"insert": {}}]}

    def test_v2_null_delta_rejected(self, client: TestClient) -> None:
        response = client.post("/api/delta/v2", json={"delta": None})

        assert response.status_code == 422
        assert response.json()["detail"] == [
            {
                "code": "invalid_delta",
                "message": "Delta must be a sequence of ops",
                "path": None,
            }
        ]


# --- Extraction ---


class TestExtractRoutes:
    def test_images_and_files(self, client: TestClient) -> None:
        body = {
            "delta": [
                {"insert": {"image": "https://e.com/1.png"}},
                {
                    "insert": {
                        "fileBlot": {
                            "href": "https://e.com/f.zip",
                            "fileName": "f.zip",
                            "fileSize": None,
                            "fileType": None,
                        }
                    }
                },
                {"insert": {"image": ""}},
            ]
        }

        assert client.post("/api/delta/images", json=body).json() == {
            "urls": ["https://e.com/1.png"]
        }
        assert client.post("/api/delta/files", json=body).json() == {
            "urls": ["https://e.com/f.zip"]
        }

    def test_malformed_rejected(self, client: TestClient) -> None:
        response = client.post("/api/delta/images", json={"delta": [{"insert": 1}]})

        assert response.status_code == 422
        assert response.json()["detail"][0]["path"] == "ops[0].insert"


# --- App ---


class TestMainApp:
    def test_health(self) -> None:
        from src.api.main import app

        response = TestClient(app).get("/health")
        assert response.json() == {"status": "ok", "service": "api"}

    def test_routes_mounted(self) -> None:
        from src.api.main import app

        paths = {route.path for route in app.routes}
        assert "/api/delta/html" in paths
        assert "/api/delta/from-html" in paths
