"""
API tests for the upload endpoint (FastAPI TestClient, no network)
"""

import pytest
from fastapi.testclient import TestClient

from src import main
from src.file_validator import (
    INVALID_FORMAT_MESSAGE,
    MISSING_FILE_MESSAGE,
    UploadValidator,
)

UPLOAD_URL = "/v1/terms/upload"


@pytest.fixture
def client():
    """TestClient bound to the application"""
    return TestClient(main.app)


def _upload(client, content, filename="notes.txt", content_type="text/plain"):
    return client.post(UPLOAD_URL, files={"file": (filename, content, content_type)})


class TestServiceEndpoints:
    """Service info and health"""

    def test_root(self, client):
        """Root endpoint reports the service as running"""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        """Health endpoint reports version and uptime"""
        response = client.get("/health")
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "healthy"
        assert payload["version"] == main.APP_VERSION
        assert payload["uptime_seconds"] >= 0


class TestUploadRanking:
    """Successful uploads"""

    def test_greeting_document(self, client, greeting_document):
        """Hello/world upload returns world first, then hello"""
        response = _upload(client, greeting_document, filename="greeting.txt")

        assert response.status_code == 200
        payload = response.json()
        assert payload["filename"] == "greeting.txt"
        assert payload["token_count"] == 3
        assert payload["distinct_terms"] == 2
        assert payload["terms"] == [
            {"term": "world", "frequency": 1, "score": 1.1},
            {"term": "hello", "frequency": 2, "score": 0.41},
        ]

    def test_empty_document(self, client):
        """Empty file is a successful, empty ranking"""
        response = _upload(client, b"", filename="empty.txt")

        assert response.status_code == 200
        payload = response.json()
        assert payload["terms"] == []
        assert payload["token_count"] == 0
        assert payload["message"] == "Document contains no words"

    def test_no_words(self, client):
        """Digits and punctuation only give an empty ranking"""
        response = _upload(client, b"123 !!! --- 456\n")

        assert response.status_code == 200
        assert response.json()["terms"] == []

    def test_truncated_to_fifty(self, client, wide_vocabulary_document):
        """Large vocabulary is cut to 50 terms"""
        response = _upload(client, wide_vocabulary_document)

        payload = response.json()
        assert len(payload["terms"]) == 50
        assert payload["distinct_terms"] == 64
        assert payload["message"] == "Ranked 50 of 64 distinct terms"

    def test_cyrillic_document(self, client):
        """Cyrillic terms are ranked with alphabetical tie order"""
        content = "Мир, мир и дружба. Дружба народов!\n".encode("utf-8")
        response = _upload(client, content, content_type="text/plain; charset=utf-8")

        assert response.status_code == 200
        terms = [item["term"] for item in response.json()["terms"]]
        # "и" is a single letter
        assert terms == ["народов", "дружба", "мир"]

    def test_any_text_subtype(self, client):
        """Any text/* declaration is accepted"""
        response = _upload(client, b"# Title\n\nSome markdown text", filename="readme.md",
                           content_type="text/markdown")
        assert response.status_code == 200

    def test_text_with_nul_byte(self, client):
        """Text with a stray NUL byte is still ranked"""
        response = _upload(client, b"hello world\x00 some text follows here\n", filename="n.txt")

        assert response.status_code == 200
        terms = [item["term"] for item in response.json()["terms"]]
        assert "hello" in terms
        assert "follows" in terms


class TestUploadRejections:
    """Boundary errors map to distinct 400 messages"""

    def test_missing_file(self, client):
        """Multipart body without a "file" part is rejected"""
        response = client.post(UPLOAD_URL, files={"attachment": ("a.txt", b"hi", "text/plain")})

        assert response.status_code == 400
        assert response.json()["detail"] == MISSING_FILE_MESSAGE

    def test_file_sent_as_plain_field(self, client):
        """A "file" form field carrying text instead of a file is rejected"""
        response = client.post(UPLOAD_URL, data={"file": "hello world"})

        assert response.status_code == 400
        assert response.json()["detail"] == MISSING_FILE_MESSAGE

    def test_no_body(self, client):
        """Request without a body is rejected"""
        response = client.post(UPLOAD_URL)

        assert response.status_code == 400
        assert response.json()["detail"] == MISSING_FILE_MESSAGE

    def test_non_text_content_type(self, client):
        """Non-text declaration is rejected with the format message"""
        response = _upload(client, b"\x89PNG\r\n\x1a\n", filename="image.png",
                           content_type="image/png")

        assert response.status_code == 400
        assert response.json()["detail"].startswith(INVALID_FORMAT_MESSAGE)

    def test_binary_behind_text_declaration(self, client):
        """PDF bytes declared as text/plain are rejected"""
        pdf = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF"
        response = _upload(client, pdf, filename="fake.txt")

        assert response.status_code == 400
        assert "Format mismatch" in response.json()["detail"]

    def test_document_too_large(self, client, monkeypatch):
        """Upload over the size limit is rejected"""
        monkeypatch.setattr(
            main, "upload_validator",
            UploadValidator(max_document_size=8, content_sniffing=False),
        )
        response = _upload(client, b"far too long for the limit")

        assert response.status_code == 400
        assert "too large" in response.json()["detail"]

    def test_unexpected_failure_is_500(self, client, monkeypatch):
        """Unexpected errors during ranking become a 500"""
        def broken_ranking(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(main, "compute_term_ranking", broken_ranking)
        response = _upload(client, b"hello world")

        assert response.status_code == 500
        assert "boom" in response.json()["detail"]
