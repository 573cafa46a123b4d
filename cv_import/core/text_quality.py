import logging
import re

from cv_import.core.errors import InsufficientTextError

logger = logging.getLogger(__name__)

MIN_TEXT_CHARS = 20
MIN_PDF_WORDS = 5  # strictly more than this many words of 3+ chars

EMAIL_SHAPE_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
RESUME_KEYWORDS = ("experience", "education", "skills", "work", "job", "company")


def _looks_like_resume_text(text: str) -> bool:
    """
    Plausibility check for PDF-recovered text.

    Guards against returning PDF internals (object dictionaries, compressed
    stream remnants) as if they were resume content.
    """
    if EMAIL_SHAPE_RE.search(text):
        return True
    long_words = [w for w in text.split() if len(w) > 2]
    if len(long_words) > MIN_PDF_WORDS:
        return True
    lowered = text.lower()
    return any(keyword in lowered for keyword in RESUME_KEYWORDS)


def validate_text(text: str, kind: str = "txt") -> str:
    """
    Reject text that cannot plausibly be a CV.

    Returns the trimmed text on success, raises InsufficientTextError otherwise.
    """
    trimmed = (text or "").strip()
    if len(trimmed) < MIN_TEXT_CHARS:
        logger.debug("Rejecting %s text: %d chars after trim", kind, len(trimmed))
        raise InsufficientTextError(
            f"only {len(trimmed)} characters recovered, at least {MIN_TEXT_CHARS} required"
        )
    if kind == "pdf" and not _looks_like_resume_text(trimmed):
        logger.debug("Rejecting pdf text: no email, too few words, no resume keywords")
        raise InsufficientTextError("PDF text does not look like resume content")
    return trimmed
