"""Tests for declared-kind resolution and raw text decoding."""

from io import BytesIO

import pytest
from docx import Document

from cv_import.core.decoder import DOCX_MEDIA_TYPE, decode, resolve_kind
from cv_import.core.errors import ExtractionFailedError, InsufficientTextError, UnsupportedKindError


class TestResolveKind:
    def test_media_types(self):
        assert resolve_kind("application/pdf", None) == "pdf"
        assert resolve_kind(DOCX_MEDIA_TYPE, None) == "docx"
        assert resolve_kind("text/plain; charset=utf-8", None) == "txt"

    def test_declared_type_takes_precedence(self):
        assert resolve_kind("application/pdf", "resume.txt") == "pdf"

    def test_suffix_fallback(self):
        assert resolve_kind("application/octet-stream", "Resume.PDF") == "pdf"
        assert resolve_kind(None, "cv.docx") == "docx"
        assert resolve_kind("", "notes.TXT") == "txt"

    def test_unsupported(self):
        with pytest.raises(UnsupportedKindError):
            resolve_kind("image/png", "scan.png")
        with pytest.raises(UnsupportedKindError):
            resolve_kind(None, "resume.doc")


class TestDecode:
    def test_txt_utf8_with_bom(self):
        raw = "\ufeffJosé Díaz\nIngeniero".encode("utf-8")
        assert decode(raw, "txt") == "José Díaz\nIngeniero"

    def test_txt_invalid_bytes_replaced(self):
        assert decode(b"Jane \xff Doe", "txt") == "Jane \ufffd Doe"

    def test_docx_paragraphs_and_tables_in_order(self):
        doc = Document()
        doc.add_paragraph("Jane Doe")
        table = doc.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Skills"
        table.rows[0].cells[1].text = "Python, SQL"
        doc.add_paragraph("Languages")
        buf = BytesIO()
        doc.save(buf)

        text = decode(buf.getvalue(), "docx")
        assert [ln for ln in text.splitlines() if ln] == ["Jane Doe", "Skills", "Python, SQL", "Languages"]

    def test_corrupt_docx_is_wrapped(self):
        with pytest.raises(ExtractionFailedError) as excinfo:
            decode(b"definitely not a zip archive", "docx")
        assert excinfo.value.kind == "docx"
        assert excinfo.value.__cause__ is not None

    def test_pdf_gate_failure_is_not_wrapped(self, make_pdf):
        with pytest.raises(InsufficientTextError):
            decode(make_pdf(b"q Q"), "pdf")

    def test_unknown_kind(self):
        with pytest.raises(UnsupportedKindError):
            decode(b"data", "rtf")
