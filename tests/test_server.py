"""Tests for the render API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_renders_hierarchy_arrays(self, client: TestClient) -> None:
        response = client.post(
            "/api/render",
            json={"hierarchy": [["A", "a.html", [["B", None, []]]]]},
        )

        assert response.status_code == 200
        body = response.json()
        root = body["rendered"]["nodes"][0]
        assert root["label"] == "A"
        assert root["link"] == "a.html"
        assert root["state"] == "expanded"
        assert root["children"][0]["state"] == "collapsed"
        assert body["html"].startswith('<div class="doxtree">')
        assert "Nodes: 2" in body["summary"]
        assert body["page"].startswith("<!DOCTYPE html>")

    def test_renders_script(self, client: TestClient, hierarchy_js: str) -> None:
        response = client.post(
            "/api/render",
            json={"script": hierarchy_js, "labels": "Dummy::Test, SimpleFixture", "filter_mode": "include"},
        )

        assert response.status_code == 200
        labels = [node["label"] for node in response.json()["rendered"]["nodes"]]
        assert labels == ["SimpleFixture", "Dummy::Test"]

    def test_empty_hierarchy(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"hierarchy": []})

        assert response.status_code == 200
        assert response.json()["rendered"]["nodes"] == []

    def test_missing_input(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"script": "   "})

        assert response.status_code == 400
        assert "Provide either" in response.json()["error"]

    def test_malformed_hierarchy(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"hierarchy": [["A", None, "children"]]})

        assert response.status_code == 422
        assert "Children" in response.json()["error"]

    def test_rejects_negative_expand_depth(self, client: TestClient) -> None:
        response = client.post("/api/render", json={"hierarchy": [], "expand_depth": -1})

        assert response.status_code == 422


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
