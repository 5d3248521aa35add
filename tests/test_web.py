"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from web import app


@pytest.fixture
def client():
    return TestClient(app)


class TestAnalyzeEndpoint:
    """POST /api/analyze."""

    def test_analyze(self, client, simple_text):
        response = client.post("/api/analyze", json={"text": simple_text})
        assert response.status_code == 200
        data = response.json()
        assert data["word_count"] == 9
        assert data["sentence_count"] == 2
        assert data["flesch_kincaid_reading_ease"] == 98.9
        assert data["reading_ease_band"] == "Easily understood by an average 11 year old student"

    def test_html_input(self, client):
        response = client.post("/api/analyze", json={"text": "<p>First</p><p>Second</p>"})
        assert response.json()["sentence_count"] == 2

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text(self, client, text):
        response = client.post("/api/analyze", json={"text": text})
        assert response.status_code == 400
        assert response.json()["detail"] == "Text cannot be empty"

    def test_missing_field(self, client):
        assert client.post("/api/analyze", json={}).status_code == 422


class TestSyllablesEndpoint:
    """POST /api/syllables."""

    def test_counts(self, client):
        response = client.post("/api/syllables", json={"words": ["forever", "simile", "shoreline"]})
        assert response.status_code == 200
        assert response.json() == {"counts": {"forever": 3, "simile": 3, "shoreline": 2}}

    def test_empty_words(self, client):
        assert client.post("/api/syllables", json={"words": []}).status_code == 400


class TestIndex:
    def test_serves_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "TextStatistics" in response.text
