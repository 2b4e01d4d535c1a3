"""Integration tests for the REST API."""

from __future__ import annotations

import json
from io import StringIO

import ezdxf
import pytest
from fastapi.testclient import TestClient

from fingerbox.web import create_app
from fingerbox.web.schemas import ErrorResponseSchema


@pytest.fixture
def client() -> TestClient:
    """Test client for a fresh application instance."""
    return TestClient(create_app())


pytestmark = pytest.mark.integration


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestEdgeTypesEndpoint:
    """Tests for GET /api/v1/edge-types."""

    def test_lists_all_selectors(self, client: TestClient) -> None:
        response = client.get("/api/v1/edge-types")

        assert response.status_code == 200
        data = response.json()
        assert [item["value"] for item in data] == ["finger", "hole", "flush_hole", "open"]
        assert data[0] == {"value": "finger", "code": "F", "label": "Finger Joint"}


class TestGenerateEndpoint:
    """Tests for POST /api/v1/generate."""

    def test_reference_box(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={
                "width": 100,
                "depth": 80,
                "height": 60,
                "thickness": 3,
                "finger_width": 10,
                "bottom_edge": "hole",
                "top_edge": "open",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bounds"] == {"width": 392.0, "height": 154.0}

        panels = {panel["id"]: panel for panel in data["panels"]}
        assert list(panels) == ["front", "back", "left", "right", "bottom"]
        assert (panels["front"]["width"], panels["front"]["height"]) == (100.0, 60.0)
        assert (panels["left"]["width"], panels["left"]["height"]) == (74.0, 60.0)
        assert len(panels["front"]["holes"]) == 5
        assert panels["bottom"]["holes"] == []

    def test_defaults_and_aliases(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"top_edge": "F"})

        assert response.status_code == 200
        data = response.json()
        assert len(data["panels"]) == 6
        assert data["parameters"]["top_edge"] == "finger"

    def test_out_of_range_is_422(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"width": 10})
        assert response.status_code == 422

    def test_unknown_edge_is_422(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"bottom_edge": "glue"})
        assert response.status_code == 422

    def test_generate_from_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/from-config",
            json={
                "config": {
                    "schema_version": "1.0",
                    "box": {"width": 120},
                    "joints": {"bottom_edge": "flush_hole"},
                }
            },
        )

        assert response.status_code == 200
        front = response.json()["panels"][0]
        assert front["width"] == 120.0
        assert front["edges"]["bottom"] == "flush_hole"

    def test_generate_from_invalid_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/from-config",
            json={"config": {"schema_version": "1.0", "box": {"width": 5}}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "box.width"


class TestExportEndpoint:
    """Tests for the export endpoints."""

    def test_list_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")
        assert response.status_code == 200
        assert response.json() == {"formats": ["dxf", "json", "svg"]}

    def test_export_svg(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/svg", json={})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert "box-100x80x60.svg" in response.headers["content-disposition"]
        assert response.text.startswith("<?xml")
        assert 'id="front-holes"' in response.text

    def test_export_dxf(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/dxf", json={"width": 150})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/dxf")
        assert "box-150x80x60.dxf" in response.headers["content-disposition"]
        doc = ezdxf.read(StringIO(response.text))
        assert len(doc.modelspace().query('LWPOLYLINE[layer=="OUTLINE"]')) == 5

    def test_export_json(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/JSON", json={"top_edge": "finger"})

        assert response.status_code == 200
        data = json.loads(response.text)
        assert len(data["panels"]) == 6

    def test_export_is_deterministic(self, client: TestClient) -> None:
        first = client.post("/api/v1/export/svg", json={"width": 200})
        second = client.post("/api/v1/export/svg", json={"width": 200})
        assert first.content == second.content

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/pdf", json={})

        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"] == {"format": "pdf", "available": ["dxf", "json", "svg"]}

    def test_invalid_parameters(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/svg", json={"thickness": 50})
        assert response.status_code == 422


class TestErrorResponses:
    """Error bodies share the documented ErrorResponseSchema shape."""

    def test_unsupported_format_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/export/pdf", json={})

        assert response.status_code == 400
        error = ErrorResponseSchema.model_validate(response.json())
        assert error.error_type == "unsupported_format"

    def test_request_validation_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"width": 10})

        assert response.status_code == 422
        error = ErrorResponseSchema.model_validate(response.json())
        assert error.error_type == "validation"
        assert isinstance(error.details, list)
        assert error.details[0]["path"] == "width"

    def test_config_error_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/from-config",
            json={"config": {"schema_version": "1.0", "box": {"height": 1000}}},
        )

        assert response.status_code == 422
        error = ErrorResponseSchema.model_validate(response.json())
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "box.height"

    def test_error_model_in_openapi(self, client: TestClient) -> None:
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/api/v1/export/{format_name}"]["post"][
            "responses"
        ]

        assert responses["400"]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponseSchema"
        }
        assert "ErrorResponseSchema" in schema["components"]["schemas"]
