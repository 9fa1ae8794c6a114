"""
End-to-end tests for the HTTP surface.
"""

import io

from docx import Document

from resume_parser.core.config import settings
from resume_parser.main import app
from resume_parser.resumes.router import get_resume_parser
from resume_parser.resumes.text_extractor import DOCX_MIME_TYPE, PDF_MIME_TYPE


class BrokenParser:

    def parse(self, text):
        raise RuntimeError("internal detail that must not leak")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Server is running"}


def test_parse_plain_text_upload(client, sample_resume_text):
    response = client.post(
        "/api/parse-resume",
        files={"resume": ("resume.txt", sample_resume_text.encode(), "text/plain")},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["personalInfo"]["name"] == "Jane Doe"
    assert body["personalInfo"]["email"] == "jane.doe@example.com"
    assert body["personalInfo"]["phone"] == "415-555-1234"
    assert body["experiences"] == [{
        "title": "Software Engineer",
        "company": "Acme Corp",
        "period": "Jan 2020 - Present",
        "description": ["Built scalable services"],
    }]
    assert body["education"] == [{"degree": "Degree Name", "institution": "University Name", "year": "2020"}]
    assert body["skills"] == ["React", "Node.js", "JavaScript"]


def test_parse_docx_upload(client):
    doc = Document()
    for line in ["John Smith", "Experience", "Data Analyst", "Globex", "2018 - 2021"]:
        doc.add_paragraph(line)
    buffer = io.BytesIO()
    doc.save(buffer)

    response = client.post(
        "/api/parse-resume",
        files={"resume": ("resume.docx", buffer.getvalue(), DOCX_MIME_TYPE)},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["personalInfo"]["name"] == "John Smith"
    assert body["experiences"][0]["title"] == "Data Analyst"
    assert body["experiences"][0]["period"] == "2018 - 2021"


def test_empty_file_gets_placeholders(client):
    response = client.post("/api/parse-resume", files={"resume": ("empty.txt", b"", "text/plain")})
    assert response.status_code == 200
    body = response.json()
    assert body["personalInfo"]["name"] == "Your Name"
    assert body["experiences"][0]["title"] == "Extracted Position"


def test_missing_file(client):
    response = client.post("/api/parse-resume", files={"document": ("resume.txt", b"Jane Doe", "text/plain")})
    assert response.status_code == 400
    assert response.json()["error"] == "No file uploaded"


def test_file_too_large(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)
    response = client.post("/api/parse-resume", files={"resume": ("resume.txt", b"Jane Doe", "text/plain")})
    assert response.status_code == 413
    body = response.json()
    assert body["error"] == "File too large"
    assert "0MB" in body["message"]


def test_upload_size_boundary(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)
    limit = 1024 * 1024

    at_limit = client.post("/api/parse-resume", files={"resume": ("resume.txt", b"a" * limit, "text/plain")})
    assert at_limit.status_code == 200

    over_limit = client.post("/api/parse-resume", files={"resume": ("resume.txt", b"a" * (limit + 1), "text/plain")})
    assert over_limit.status_code == 413


def test_decode_failure(client):
    response = client.post(
        "/api/parse-resume",
        files={"resume": ("resume.pdf", b"not really a pdf", PDF_MIME_TYPE)},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse resume", "message": "Failed to parse PDF file"}


def test_unexpected_failure_is_generic(client):
    app.dependency_overrides[get_resume_parser] = BrokenParser
    try:
        response = client.post(
            "/api/parse-resume",
            files={"resume": ("resume.txt", b"Jane Doe", "text/plain")},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body == {"error": "Failed to parse resume", "message": "Unexpected error while parsing resume"}
    assert "internal detail" not in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"
    assert "X-Process-Time" in response.headers
