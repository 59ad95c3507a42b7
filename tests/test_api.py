"""Tests for the HTTP endpoint layer."""

from fastapi.testclient import TestClient

from morse_translator.api.app import create_app
from morse_translator.config import ServerConfig


class TestTextToMorse:
    """POST /api/morse/text-to-morse"""

    def test_encodes_body(self, client: TestClient) -> None:
        response = client.post("/api/morse/text-to-morse", content="SOS")
        assert response.status_code == 200
        assert response.text == "... --- ..."
        assert response.headers["content-type"].startswith("text/plain")

    def test_ignores_content_type(self, client: TestClient) -> None:
        response = client.post(
            "/api/morse/text-to-morse",
            content="HI THERE",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert response.text == ".... .. / - .... . .-. ."

    def test_unmapped_characters(self, client: TestClient) -> None:
        response = client.post("/api/morse/text-to-morse", content="A#B")
        assert response.status_code == 200
        assert response.text == ".- ? -..."

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post("/api/morse/text-to-morse")
        assert response.status_code == 200
        assert response.text == ""

    def test_invalid_utf8(self, client: TestClient) -> None:
        response = client.post("/api/morse/text-to-morse", content=b"E\xff")
        assert response.status_code == 200
        assert response.text == ". ?"


class TestMorseToText:
    """POST /api/morse/morse-to-text"""

    def test_decodes_body(self, client: TestClient) -> None:
        response = client.post("/api/morse/morse-to-text", content="... --- ...")
        assert response.status_code == 200
        assert response.text == "SOS"
        assert response.headers["content-type"].startswith("text/plain")

    def test_unknown_symbols(self, client: TestClient) -> None:
        response = client.post("/api/morse/morse-to-text", content="....... .-")
        assert response.status_code == 200
        assert response.text == "#A"

    def test_words_and_extra_spaces(self, client: TestClient) -> None:
        response = client.post(
            "/api/morse/morse-to-text", content="  ....  .. / -  \n"
        )
        assert response.status_code == 200
        assert response.text == "HI T"


class TestApp:
    """Tests for app wiring."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_cors_any_origin(self, client: TestClient) -> None:
        response = client.post(
            "/api/morse/text-to-morse",
            content="E",
            headers={"Origin": "http://example.com"},
        )
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/api/morse/morse-to-text",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_get_not_allowed(self, client: TestClient) -> None:
        response = client.get("/api/morse/text-to-morse")
        assert response.status_code == 405

    def test_custom_prefix(self) -> None:
        client = TestClient(create_app(ServerConfig(prefix="/morse/")))
        response = client.post("/morse/text-to-morse", content="E")
        assert response.text == "."
        assert client.post("/api/morse/text-to-morse", content="E").status_code == 404

    def test_root_prefix(self) -> None:
        client = TestClient(create_app(ServerConfig(prefix="")))
        response = client.post("/morse-to-text", content=".")
        assert response.text == "E"

    def test_config_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("MORSE_TRANSLATOR_PREFIX", "/v2")
        client = TestClient(create_app())
        assert client.post("/v2/morse-to-text", content="-").text == "T"
