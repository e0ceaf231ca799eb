"""Boundary tests for the generate API - testing limits and edge cases."""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestPromptBoundaries:
    """Test prompt boundary conditions."""

    def test_single_character_prompt(self, client):
        """Single character prompt gives the standard building."""
        response = client.post("/api/generate/", json={"prompt": "a"})
        assert response.status_code == 200
        assert response.json()["building"]["style"] == "standard"

    def test_unicode_emoji_prompt(self, client):
        """Emoji in the prompt should work."""
        response = client.post("/api/generate/", json={"prompt": "🏰 a medieval fortress 🏰"})
        assert response.status_code == 200
        assert response.json()["building"]["style"] == "castle"

    def test_special_characters_prompt(self, client):
        """Quotes and brackets never reach the script unescaped."""
        response = client.post(
            "/api/generate/",
            json={"prompt": "a house <test> & \"quotes\" 'apostrophe'"},
        )
        assert response.status_code == 200
        assert "<test>" not in response.json()["code"]

    def test_long_prompt(self, client):
        """Long prompts are handled."""
        prompt = "a modern building " + "with lots of detail " * 500
        response = client.post("/api/generate/", json={"prompt": prompt})
        assert response.status_code == 200

    def test_extra_fields_ignored(self, client):
        """Unknown fields do not break generation."""
        response = client.post("/api/generate/", json={"prompt": "a church", "colour": "red"})
        assert response.status_code == 200

    def test_invalid_json(self, client):
        """Non-JSON bodies are rejected."""
        response = client.post(
            "/api/generate/",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code in [400, 422]


class TestDimensionBoundaries:
    """Test dimension boundary conditions."""

    def test_one_floor(self, client):
        response = client.post("/api/generate/", json={"prompt": "a 1 floor modern pavilion"})
        assert response.status_code == 200
        assert "Balcony_" not in response.json()["code"]

    def test_max_floors(self, client):
        response = client.post("/api/generate/", json={"prompt": "a 200 floor office"})
        assert response.status_code == 200

    def test_above_max_floors(self, client):
        response = client.post("/api/generate/", json={"prompt": "a 201 floor office"})
        assert response.status_code == 422

    def test_max_width(self, client):
        response = client.post("/api/generate/", json={"prompt": "an office 1000 wide"})
        assert response.status_code == 200

    def test_above_max_depth(self, client):
        response = client.post("/api/generate/", json={"prompt": "an office 1001 deep"})
        assert response.status_code == 422

    @pytest.mark.parametrize("prompt", [
        "a 1 floor gothic church 1 wide 1 deep",
        "a castle 1 wide 1 deep",
        "a cottage 1 wide 1 deep",
        "a factory 1 wide 1 deep",
    ])
    def test_tiny_buildings(self, client, prompt):
        response = client.post("/api/generate/", json={"prompt": prompt})
        assert response.status_code == 200
