"""
Test Configuration and Fixtures
"""
import io

import pytest
from docx import Document
from fastapi.testclient import TestClient

from app.main import app
from config import settings


def build_pdf(text):
    """Assemble a one-page PDF showing ``text`` in Helvetica."""
    stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n".encode() + body + b"\nendobj\n")

    xref_offset = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n".encode())
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode())
    out.write(
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n".encode()
    )
    return out.getvalue()


def build_docx(*paragraphs):
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    out = io.BytesIO()
    document.save(out)
    return out.getvalue()


@pytest.fixture(scope='function')
def scratch_dirs(tmp_path, monkeypatch):
    """Point the upload and temp directories at a per-test location"""
    upload_dir = tmp_path / 'uploads'
    temp_dir = tmp_path / 'temp'
    monkeypatch.setattr(settings, 'UPLOAD_DIR', upload_dir)
    monkeypatch.setattr(settings, 'TEMP_DIR', temp_dir)
    return upload_dir, temp_dir


@pytest.fixture(scope='function')
def upload_dir(scratch_dirs):
    return scratch_dirs[0]


@pytest.fixture(scope='function')
def temp_dir(scratch_dirs):
    return scratch_dirs[1]


@pytest.fixture(scope='function')
def client(scratch_dirs):
    """Create test client with the lifespan (directory bootstrap) started"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def hello_pdf():
    return build_pdf('Hello World')


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def hello_docx():
    return build_docx('Hello World', 'Second paragraph of the document.')
