"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from app.config.settings import get_settings
from app.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    """Tests for /health and /ready."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_ready(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["chunking"]["profile"] == "default"

    def test_ready_degraded_on_unknown_profile(self, client, monkeypatch):
        monkeypatch.setenv("CHUNKING_PROFILE", "missing")
        get_settings.cache_clear()
        response = client.get("/ready")
        assert response.status_code == 503
        assert response.json()["chunking"]["ok"] is False


class TestChunkRoute:
    """Tests for POST /chunk."""

    def test_sentences(self, client):
        response = client.post(
            "/chunk",
            json={"text": "Hello world. This is a test.", "strategy": "sentences", "chunk_size": 100, "overlap": 0},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["strategy"] == "sentences"
        assert body["profile"] == "default"
        assert body["chunks"] == [
            {"text": "Hello world. This is a test.", "index": 0, "chunk_id": None, "chunk_hash": None}
        ]
        assert body["stats"]["chunk_count"] == 1
        assert body["stats"]["total_length"] == 28

    def test_default_profile_uses_paragraphs(self, client):
        response = client.post("/chunk", json={"text": "Para one.\n\nPara two."})
        assert response.status_code == 200
        assert [c["text"] for c in response.json()["chunks"]] == ["Para one.", "Para two."]

    def test_named_profile(self, client):
        response = client.post("/chunk", json={"text": "One. Two.", "profile": "sentences"})
        assert response.status_code == 200
        assert response.json()["strategy"] == "sentences"

    def test_document_id_adds_ids(self, client):
        response = client.post("/chunk", json={"text": "Para one.\n\nPara two.", "document_id": "doc-7"})
        assert response.status_code == 200
        body = response.json()
        assert body["document_id"] == "doc-7"
        assert all(c["chunk_id"].startswith("chunk_") for c in body["chunks"])
        assert all(len(c["chunk_hash"]) == 64 for c in body["chunks"])

    def test_empty_text(self, client):
        response = client.post("/chunk", json={"text": ""})
        assert response.status_code == 200
        body = response.json()
        assert body["chunks"] == []
        assert body["stats"]["chunk_count"] == 0

    def test_overlap_not_below_chunk_size(self, client):
        response = client.post("/chunk", json={"text": "x", "chunk_size": 10, "overlap": 10})
        assert response.status_code == 400

    def test_unknown_profile(self, client):
        response = client.post("/chunk", json={"text": "x", "profile": "missing"})
        assert response.status_code == 400
        assert "missing" in response.json()["detail"]

    def test_unknown_strategy(self, client):
        response = client.post("/chunk", json={"text": "x", "strategy": "semantic"})
        assert response.status_code == 400

    def test_text_too_long(self, client, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "10")
        get_settings.cache_clear()
        response = client.post("/chunk", json={"text": "x" * 11})
        assert response.status_code == 413

    def test_chunk_size_above_default_ceiling(self, client):
        response = client.post("/chunk", json={"text": "Hello world.", "chunk_size": 1500})
        assert response.status_code == 200
        assert response.json()["chunks"][0]["text"] == "Hello world."

    def test_override_out_of_range(self, client):
        response = client.post("/chunk", json={"text": "x", "chunk_size": 0})
        assert response.status_code == 422


class TestProfilesAndStats:
    """Tests for GET /chunk/profiles and POST /chunk/stats."""

    def test_profiles(self, client):
        response = client.get("/chunk/profiles")
        assert response.status_code == 200
        body = response.json()
        assert body["active"] == "default"
        assert body["profiles"]["sentences"]["chunk_size"] == 200

    def test_stats(self, client):
        response = client.post(
            "/chunk/stats",
            json={"chunks": [{"text": "ab", "index": 0}, {"text": "abc", "index": 1}]},
        )
        assert response.status_code == 200
        assert response.json() == {
            "chunk_count": 2,
            "total_length": 5,
            "avg_chunk_size": 3,
            "min_chunk_size": 2,
            "max_chunk_size": 3,
        }

    def test_stats_empty(self, client):
        response = client.post("/chunk/stats", json={"chunks": []})
        assert response.json()["chunk_count"] == 0

    def test_stats_rejects_empty_text(self, client):
        response = client.post("/chunk/stats", json={"chunks": [{"text": "", "index": 0}]})
        assert response.status_code == 422


class TestRun:
    """Tests for the uvicorn entry point."""

    def test_run_uses_settings(self, monkeypatch):
        import app.main as main

        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9001")
        get_settings.cache_clear()

        main.run()

        assert calls == [(("app.main:app",), {"host": "127.0.0.1", "port": 9001})]
