"""
Shared fixtures: a fake Gemini client and generated PDFs.
"""
import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from types import SimpleNamespace

import pytest

from backend.ats_review.config import Settings

SAMPLE_ANALYSIS = {
    "ats_score": {
        "total": 72,
        "breakdown": {"relevance": 30, "keyword_match": 20, "formatting": 15, "contact_completeness": 7},
    },
    "missing_sections": {"critical": [], "recommended": ["Certifications"]},
    "missing_skills": {"must_have": ["C++"], "nice_to_have": ["Azure"]},
    "missing_achievements": ["Quantify project impact"],
    "contact_info": {"email": "jane@example.com", "linkedin": None, "github": None, "portfolio": None},
    "suggestions": ["Add a summary section"],
}


class FakeModels:
    def __init__(self, reply="", error=None, delay=0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    def generate_content(self, model, contents, **kwargs):
        self.calls.append({"model": model, "contents": contents})
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.reply, candidates=[])


class FakeClient:
    """Stands in for google.genai.Client; only models.generate_content is used."""

    def __init__(self, reply="", error=None, delay=0.0):
        self.models = FakeModels(reply=reply, error=error, delay=delay)

    @property
    def prompts(self):
        return [call["contents"] for call in self.models.calls]


def _escape(line: str) -> str:
    return line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(pages: list[list[str]]) -> bytes:
    """Build a small valid PDF with one Helvetica text line per entry."""
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects[2] = f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode()

    for pid, lines in zip(page_ids, pages):
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for i, line in enumerate(lines):
            if i:
                ops.append("0 -16 Td")
            ops.append(f"({_escape(line)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects[pid] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
        ).encode()
        objects[pid + 1] = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"

    out = bytearray(b"%PDF-1.4\n")
    offsets = {}
    for num in sorted(objects):
        offsets[num] = len(out)
        out += f"{num} 0 obj\n".encode() + objects[num] + b"\nendobj\n"

    xref_at = len(out)
    size = max(objects) + 1
    out += f"xref\n0 {size}\n".encode()
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += f"{offsets[num]:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {size} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


RESUME_PAGES = [
    ["Jane Doe", "Education", "BS Computer Science", "Skills", "Python, Go"],
    ["Experience", "Software Engineer at Contoso"],
]


@pytest.fixture
def resume_pdf_bytes():
    return make_pdf(RESUME_PAGES)


@pytest.fixture
def resume_pdf(tmp_path, resume_pdf_bytes):
    path = tmp_path / "resume.pdf"
    path.write_bytes(resume_pdf_bytes)
    return path


@pytest.fixture
def fake_client():
    return FakeClient(reply="```json\n" + json.dumps(SAMPLE_ANALYSIS) + "\n```")


@pytest.fixture
def settings(tmp_path):
    return Settings(api_key="test-key", upload_folder=str(tmp_path / "uploads"))


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def sample_analysis():
    return SAMPLE_ANALYSIS


class _GeminiStubHandler(BaseHTTPRequestHandler):
    # HTTP/1.1 keeps connections alive so the client pools them
    protocol_version = "HTTP/1.1"
    reply_text = json.dumps({"a": 1})

    def do_POST(self):
        length = int(self.headers.get("Content-Length") or 0)
        self.server.requests.append((self.path, self.rfile.read(length)))
        body = json.dumps({
            "candidates": [{
                "content": {"role": "model", "parts": [{"text": self.reply_text}]},
                "finishReason": "STOP",
            }],
        }).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def gemini_stub():
    """Local HTTP server answering generateContent calls; yields its base URL."""
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _GeminiStubHandler)
    httpd.requests = []
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield SimpleNamespace(
            base_url=f"http://127.0.0.1:{httpd.server_address[1]}/",
            requests=httpd.requests,
        )
    finally:
        httpd.shutdown()
        httpd.server_close()
