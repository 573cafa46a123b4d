from typing import List, Optional

import pytest

from cv_import import config
from cv_import.core.rate_limiter import UploadRateLimiter
from cv_import.main import app


@pytest.fixture(autouse=True)
def fresh_rate_limiter():
    """Every test starts with an empty upload window."""
    app.state.rate_limiter = UploadRateLimiter(
        max_requests=config.RATE_LIMIT_MAX_REQUESTS,
        window_seconds=config.RATE_LIMIT_WINDOW_SECONDS,
    )
    yield app.state.rate_limiter


def _build_pdf(content: bytes, info: Optional[bytes] = None) -> bytes:
    """Minimal single-page PDF with an uncompressed content stream."""
    objects: List[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R >>",
        b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
    ]
    if info is not None:
        objects.append(info)

    out = [b"%PDF-1.4\n"]
    for number, body in enumerate(objects, start=1):
        out.append(str(number).encode() + b" 0 obj\n" + body + b"\nendobj\n")
    trailer = b"<< /Root 1 0 R"
    if info is not None:
        trailer += b" /Info " + str(len(objects)).encode() + b" 0 R"
    out.append(b"trailer\n" + trailer + b" >>\n%%EOF\n")
    return b"".join(out)


@pytest.fixture
def make_pdf():
    return _build_pdf


def text_lines_stream(lines: List[str]) -> bytes:
    """Content stream drawing each line with Tj, one Td step apart."""
    ops = [b"BT", b"/F1 11 Tf", b"72 720 Td"]
    for i, line in enumerate(lines):
        if i:
            ops.append(b"0 -14 Td")
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        ops.append(b"(" + escaped.encode("latin-1") + b") Tj")
    ops.append(b"ET")
    return b"\n".join(ops)


@pytest.fixture
def lines_stream():
    return text_lines_stream
