import logging
from typing import Optional

from cv_import.core.docx_extractor import extract_docx_text
from cv_import.core.errors import ExtractionFailedError, ResumeParseError, UnsupportedKindError
from cv_import.core.pdf_extractor import extract_pdf_text
from cv_import.core.schemas import DocumentKind

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

MEDIA_TYPE_KINDS = {
    "application/pdf": "pdf",
    DOCX_MEDIA_TYPE: "docx",
    "text/plain": "txt",
}

SUFFIX_KINDS = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".txt": "txt",
}


def resolve_kind(content_type: Optional[str], filename: Optional[str]) -> DocumentKind:
    """
    Decide how to decode an upload.

    The declared media type wins; the filename suffix is the fallback for
    generic or missing types (e.g. application/octet-stream).
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type in MEDIA_TYPE_KINDS:
        return MEDIA_TYPE_KINDS[media_type]

    name = (filename or "").strip().lower()
    for suffix, kind in SUFFIX_KINDS.items():
        if name.endswith(suffix):
            return kind

    raise UnsupportedKindError(content_type, filename)


def _decode_txt(raw: bytes) -> str:
    return raw.decode("utf-8-sig", errors="replace")


_DECODERS = {
    "pdf": extract_pdf_text,
    "docx": extract_docx_text,
    "txt": _decode_txt,
}


def decode(raw: bytes, kind: str) -> str:
    """
    Best-effort plain text for the given document kind.

    Our own typed errors (e.g. InsufficientTextError from the PDF gate) pass
    through; anything else a delegate raises becomes ExtractionFailedError.
    """
    decoder = _DECODERS.get(kind)
    if decoder is None:
        raise UnsupportedKindError(kind)
    try:
        return decoder(raw)
    except ResumeParseError:
        raise
    except Exception as exc:
        logger.warning("Decoding %s upload failed: %s", kind, exc)
        raise ExtractionFailedError(kind, str(exc)) from exc
