import logging
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from cv_import.core.contact_extractor import extract_contact_info
from cv_import.core.decoder import decode, resolve_kind
from cv_import.core.field_extractors import extract_section
from cv_import.core.record_assembler import assemble_record
from cv_import.core.schemas import ParsedRecord
from cv_import.core.section_segmenter import find_first_header, segment_sections
from cv_import.core.text_quality import validate_text

logger = logging.getLogger(__name__)


def _split_lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def parse_text_to_record(text: str) -> ParsedRecord:
    """
    Structure already-decoded resume text.

    Contact details are searched over the whole text, everything else is
    attributed to sections by header keywords.
    """
    lines = _split_lines(text)
    contact = extract_contact_info(lines, header_index=find_first_header(lines))

    sections = []
    for tag, buffer in segment_sections(lines):
        logger.debug("Extracting %s section from %d lines", tag, len(buffer))
        sections.append(extract_section(tag, buffer))

    return assemble_record(contact, sections)


def parse_resume_bytes(raw: bytes, content_type: Optional[str], filename: Optional[str]) -> ParsedRecord:
    """
    Full pipeline: declared kind -> text -> quality gate -> record.

    Raises UnsupportedKindError, ExtractionFailedError or InsufficientTextError.
    """
    kind = resolve_kind(content_type, filename)
    text = decode(raw, kind)
    text = validate_text(text, kind=kind)
    record = parse_text_to_record(text)
    logger.info(
        "Parsed %s resume: %d experience, %d education, %d skills, %d languages",
        kind,
        len(record.experience),
        len(record.education),
        len(record.skills),
        len(record.languages),
    )
    return record


async def parse_resume(raw: bytes, content_type: Optional[str], filename: Optional[str]) -> ParsedRecord:
    """Async entry point; decoding and parsing run in the threadpool."""
    return await run_in_threadpool(parse_resume_bytes, raw, content_type, filename)
