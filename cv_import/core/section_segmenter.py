"""
Partition resume lines into labelled sections.

A small state machine: before the first recognised header nothing is
collected; after it, every line goes to the current section's buffer until
the next header. A header is any line shorter than HEADER_MAX_CHARS whose
lowercase form contains one of the section keywords.

Known false positive: short prose such as "My work experience began in 2015"
also passes the header test and opens a section.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from cv_import.core.contact_extractor import EMAIL_RE, PROFILE_URL_RE, URL_RE
from cv_import.core.schemas import SectionTag

logger = logging.getLogger(__name__)

HEADER_MAX_CHARS = 50

# Checked in this order; the first tag with a matching keyword wins
SECTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "summary": ("summary", "profile", "objective", "about"),
    "experience": ("experience", "employment", "work history", "career"),
    "education": ("education", "academic", "qualifications"),
    "skills": ("skills", "competencies", "technical skills"),
    "languages": ("languages", "linguistic"),
}

Section = Tuple[SectionTag, List[str]]


def detect_section_header(line: str) -> Optional[SectionTag]:
    """Return the section tag when the line reads as a section header."""
    text = line.strip()
    if not text or len(text) >= HEADER_MAX_CHARS:
        return None
    if EMAIL_RE.search(text) or URL_RE.search(text) or PROFILE_URL_RE.search(text):
        return None
    lowered = text.lower()
    for tag, keywords in SECTION_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return tag
    return None


def _inline_content(header_line: str) -> Optional[str]:
    """'Skills: Python, SQL' -> 'Python, SQL'."""
    if ":" not in header_line:
        return None
    rest = header_line.split(":", 1)[1].strip()
    return rest if re.search(r"\w", rest) else None


def find_first_header(lines: List[str]) -> Optional[int]:
    for i, line in enumerate(lines):
        if detect_section_header(line):
            return i
    return None


def segment_sections(lines: List[str]) -> List[Section]:
    """
    Split lines into (tag, buffer) pairs in source order.

    A tag can appear more than once when the resume repeats a header; the
    consumer decides how to merge (the assembler keeps the last one).
    """
    sections: List[Section] = []
    current_tag: Optional[SectionTag] = None
    buffer: List[str] = []

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        tag = detect_section_header(line)
        if tag:
            if current_tag and buffer:
                sections.append((current_tag, buffer))
            logger.debug("Section header %r -> %s", line, tag)
            current_tag = tag
            buffer = []
            inline = _inline_content(line)
            if inline:
                buffer.append(inline)
        elif current_tag:
            buffer.append(line)
        # else: text before any recognised header is dropped

    if current_tag and buffer:
        sections.append((current_tag, buffer))
    return sections
