import re
from typing import List, Optional

from cv_import.core.schemas import PersonalInfo


EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
# Optional "+", then digit groups of 1-4 separated by space, dash, dot or parentheses
PHONE_RE = re.compile(r"\+?\(?\d{1,4}\)?(?:[-.\s]?\(?\d{1,4}\)?){2,5}")
PROFILE_URL_RE = re.compile(r"linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)
URL_RE = re.compile(r"\bhttps?://[^\s|,;<>\"]+", re.IGNORECASE)
LOCATION_RE = re.compile(r"^[A-Za-z][A-Za-z .'-]*,\s*[A-Za-z][A-Za-z .'-]+$")
YEAR_RANGE_RE = re.compile(r"^\d{4}\s*[-–]\s*\d{4}$")

MIN_PHONE_DIGITS = 7


def _find_phone(line: str) -> Optional[str]:
    """First phone-shaped run with enough digits; bare years never qualify."""
    for match in PHONE_RE.finditer(line):
        candidate = match.group(0).strip()
        if YEAR_RANGE_RE.match(candidate):
            continue
        if len(re.sub(r"\D", "", candidate)) >= MIN_PHONE_DIGITS:
            return candidate
    return None


def _find_homepage(line: str) -> Optional[str]:
    # A LinkedIn URL is the profile, never the homepage
    if PROFILE_URL_RE.search(line):
        return None
    match = URL_RE.search(line)
    if not match:
        return None
    return match.group(0).rstrip(".,;:)]")


def _find_address(lines: List[str]) -> str:
    for line in lines:
        if EMAIL_RE.search(line) or URL_RE.search(line) or _find_phone(line):
            continue
        if LOCATION_RE.match(line):
            return re.sub(r"\s*,\s*", ", ", line)
    return ""


def extract_contact_info(lines: List[str], header_index: Optional[int] = None) -> PersonalInfo:
    """
    Scan every line for contact details; the first line with a match wins.

    full_name is simply the first non-empty line. The address is only looked
    for in the header block, between the name line and the first section
    header (header_index).
    """
    info = PersonalInfo()
    lines = [ln.strip() for ln in lines if ln and ln.strip()]
    if not lines:
        return info

    info.full_name = lines[0]

    for line in lines:
        if not info.email:
            m = EMAIL_RE.search(line)
            if m:
                info.email = m.group(0)
        if not info.phone:
            phone = _find_phone(line)
            if phone:
                info.phone = phone
        if not info.profile_url:
            m = PROFILE_URL_RE.search(line)
            if m:
                info.profile_url = m.group(0)
        if not info.homepage:
            homepage = _find_homepage(line)
            if homepage:
                info.homepage = homepage

    end = header_index if header_index is not None else len(lines)
    info.address = _find_address(lines[1:end])
    return info
