#!/usr/bin/env python3
"""
Tests for the HTTP API in webui: envelopes, status codes and headers
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path to import modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import Config
from webui.main import create_app, SECURITY_HEADERS


@pytest.fixture
def client():
    return TestClient(create_app(Config()))


class TestGeneral:
    """Root, health and headers"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Tagger API"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_security_headers(self, client):
        response = client.get("/health")
        for header, value in SECURITY_HEADERS.items():
            assert response.headers[header] == value

    @pytest.mark.parametrize("path", ["/tv", "/tv/episode", "/tv/season", "/music", "/music/song"])
    def test_help_pages(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "About" in response.text


class TestEpisodeRoute:
    """POST /tv/episode"""

    def test_parsed_capture(self, client):
        response = client.post("/tv/episode", params={"name": "hiS01E04.ex"})
        assert response.status_code == 200
        assert response.json() == {
            "status": 200,
            "msg": "Success",
            "body": {
                "file_path": "hiS01E04.ex",
                "filename": "hiS01E04",
                "ext": ".ex",
                "season": 1,
                "episode": 4,
            },
        }

    def test_context_wins(self, client):
        response = client.post("/tv/episode", params={"name": "hiS01E04.ex", "season": 3, "episode": 9})
        body = response.json()["body"]
        assert (body["season"], body["episode"]) == (3, 9)

    def test_unresolved_season(self, client):
        response = client.post("/tv/episode", params={"name": "plainname"})
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["body"] is None
        assert data["msg"].startswith("No season number passed as context")

    def test_unresolved_episode(self, client):
        response = client.post("/tv/episode", params={"name": "plainname", "season": 1})
        assert response.status_code == 400
        assert response.json()["msg"].startswith("No episode number passed as context")

    def test_negative_context_rejected(self, client):
        response = client.post("/tv/episode", params={"name": "x", "season": -1})
        assert response.status_code == 422

    def test_name_required(self, client):
        assert client.post("/tv/episode").status_code == 422


class TestSeasonRoute:
    """POST /tv/season"""

    def test_batch(self, client):
        response = client.post(
            "/tv/season",
            params={"number": 4},
            json={"names": ["ep 1.mp4", "etc episode4.mpv"]},
        )
        assert response.status_code == 200
        body = response.json()["body"]
        assert [(c["season"], c["episode"]) for c in body] == [(4, 1), (4, 4)]

    def test_batch_without_number(self, client):
        response = client.post("/tv/season", json={"names": ["s2e1.mkv", "s2e2.mkv"]})
        assert response.status_code == 200
        assert [c["season"] for c in response.json()["body"]] == [2, 2]

    def test_first_failure_reported(self, client):
        response = client.post(
            "/tv/season",
            params={"number": 1},
            json={"names": ["e1.mkv", "bonus.mkv", "e3.mkv"]},
        )
        assert response.status_code == 400
        data = response.json()
        assert data["body"] is None
        assert "bonus.mkv" in data["msg"]
        assert "No episode number passed as context" in data["msg"]

    def test_body_required(self, client):
        assert client.post("/tv/season", params={"number": 1}).status_code == 422


class TestSongRoute:
    """POST /music/song"""

    def test_song_without_context(self, client):
        response = client.post("/music/song", params={"name": "My.Song-Title.mp3"})
        assert response.status_code == 200
        body = response.json()["body"]
        assert body["title"] == "My Song Title"
        assert body["artist"] is None
        assert body["render"] == "Unknown artist — My Song Title"

    def test_song_with_context(self, client):
        response = client.post(
            "/music/song",
            params={"name": "Track.mp3", "artist": "The Band", "album": "Track"},
        )
        body = response.json()["body"]
        assert body["album"] == "Track"
        assert body["render"] == "The Band — Track"


class TestErrorResponses:
    """Headers and envelopes on failing requests"""

    def test_headers_on_bad_request(self, client):
        response = client.post("/tv/episode", params={"name": "plainname"})
        assert response.status_code == 400
        for header, value in SECURITY_HEADERS.items():
            assert response.headers[header] == value

    def test_unhandled_error_envelope(self):
        app = create_app(Config())

        @app.get("/explode")
        async def explode():
            raise RuntimeError("boom")

        response = TestClient(app, raise_server_exceptions=False).get("/explode")
        assert response.status_code == 500
        assert response.json() == {"status": 500, "msg": "Internal server error", "body": None}
        for header, value in SECURITY_HEADERS.items():
            assert response.headers[header] == value
