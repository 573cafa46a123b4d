"""
Typed failures raised by the resume import pipeline.

All of them are terminal: parsing is deterministic, so retrying the same bytes
cannot succeed. The HTTP layer maps each one to a status code.
"""

from typing import Optional


class ResumeParseError(Exception):
    """Base class for every pipeline failure."""


class UnsupportedKindError(ResumeParseError):
    """Declared media type and filename both fall outside pdf/docx/txt."""

    def __init__(self, content_type: Optional[str] = None, filename: Optional[str] = None):
        self.content_type = content_type or ""
        self.filename = filename or ""
        super().__init__(
            f"Unsupported file type (content type {self.content_type!r}, filename {self.filename!r}). "
            "Please upload a PDF, DOCX, or TXT file."
        )


class ExtractionFailedError(ResumeParseError):
    """A decoding delegate (DOCX reader, PDF tiers, text decoder) raised."""

    def __init__(self, kind: str, reason: Optional[str] = None):
        self.kind = kind
        self.reason = reason or ""
        message = f"Failed to extract text from {kind.upper()} file"
        if self.reason:
            message = f"{message}: {self.reason}"
        super().__init__(message)


class InsufficientTextError(ResumeParseError):
    """Recovered text is too short or does not look like resume content."""

    def __init__(self, reason: str = "not enough readable text"):
        self.reason = reason
        super().__init__(f"Insufficient text recovered: {reason}")
