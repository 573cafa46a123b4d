"""
Per-section heuristics turning line buffers into typed entries.

Every extractor takes the lines collected for one section (trimmed, non-empty,
source order) and returns that section's payload. Nothing here raises on odd
input: unrecognised lines are skipped.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from cv_import.core.schemas import (
    SUMMARY_MAX_CHARS,
    EducationEntry,
    EducationSection,
    ExperienceEntry,
    ExperienceSection,
    LanguageEntry,
    LanguagesSection,
    SectionContent,
    SkillEntry,
    SkillsSection,
    SummarySection,
)


# --- Experience ---

DATE_RANGE_RE = re.compile(
    r"(\d{4})\s*[-–—]\s*(?:[A-Za-z]{3,9}\.?\s+)?(\d{4}|present|current)\b",
    re.IGNORECASE,
)
# A leading dash is a bullet only when text, not a year, follows it
BULLET_RE = re.compile(r"^(?:[•●*]|[-–](?!\s*\d))")
# A dash counts as a separator unless it joins two letters (Front-end, Full-stack)
_DASH = r"(?:(?<![A-Za-z])[-–—]|[-–—](?![A-Za-z]))"
HEADER_SEPARATOR_RE = re.compile(rf"\||{_DASH}|(?:^|\s)at\s")
SPACED_SPLIT_RE = re.compile(r"\s*\|\s*|\s+[-–—]\s+|(?:^|\s+)at\s+")
BARE_DASH_SPLIT_RE = re.compile(rf"\s*{_DASH}\s*")
_SEPARATOR_CHARS = " |-–—"


def _split_role_company(text: str) -> Tuple[str, str]:
    """'Senior Developer - Acme Corp' -> ('Senior Developer', 'Acme Corp')."""
    parts = [p.strip() for p in SPACED_SPLIT_RE.split(text)]
    if len(parts) == 1:
        parts = [p.strip() for p in BARE_DASH_SPLIT_RE.split(text, maxsplit=1)]
    role = parts[0].strip(_SEPARATOR_CHARS)
    company = parts[1].strip(_SEPARATOR_CHARS) if len(parts) > 1 else ""
    return role, company


def _apply_dates(entry: ExperienceEntry, match: re.Match) -> None:
    end = match.group(2)
    entry.start_date = match.group(1)
    if end.lower() in ("present", "current"):
        entry.current = True
        entry.end_date = ""
    else:
        entry.current = False
        entry.end_date = end


def extract_experience(lines: List[str]) -> List[ExperienceEntry]:
    """
    Line-by-line classification into job entries.

    Order of checks per line: bullet, year range, header. Bullets keep any
    dates they mention as description text. A year range on a line that
    still has a header separator once the range is removed
    ('Engineer | Acme | 2018 - 2020') is a header carrying its own dates.
    """
    entries: List[ExperienceEntry] = []
    current: Optional[ExperienceEntry] = None

    def start_entry(header_text: str) -> ExperienceEntry:
        if current is not None and current.role:
            entries.append(current)
        role, company = _split_role_company(header_text)
        return ExperienceEntry(role=role, company=company)

    for line in lines:
        if BULLET_RE.match(line):
            if current is not None:
                current.description += line + "\n"
            continue

        date_match = DATE_RANGE_RE.search(line)
        if date_match:
            rest = (line[: date_match.start()] + " " + line[date_match.end():]).strip(_SEPARATOR_CHARS)
            if rest and HEADER_SEPARATOR_RE.search(rest):
                current = start_entry(rest)
                _apply_dates(current, date_match)
            elif current is not None:
                _apply_dates(current, date_match)
            continue

        if HEADER_SEPARATOR_RE.search(line):
            current = start_entry(line)

    if current is not None and current.role:
        entries.append(current)
    return entries


# --- Education ---

EDUCATION_LINE_MIN_CHARS = 10
YEAR_RE = re.compile(r"\b\d{4}\b")
YEARS_ONLY_RE = re.compile(r"\d{4}(?:\s*[-–—]\s*(?:\d{4}|present|current))?", re.IGNORECASE)
GPA_RE = re.compile(r"\bGPA\b\s*[:\-]?\s*(\d(?:\.\d{1,2})?)", re.IGNORECASE)


def _split_education_line(line: str) -> List[str]:
    if "," in line:
        return [p.strip() for p in line.split(",")]
    if "|" in line:
        return [p.strip() for p in line.split("|")]
    return [line.strip()]


def extract_education(lines: List[str]) -> List[EducationEntry]:
    """
    One entry per line longer than ten characters.

    Short year-only lines ('2016') and GPA lines complete the entry above them.
    """
    entries: List[EducationEntry] = []

    for line in lines:
        text = line.strip()
        gpa_match = GPA_RE.search(text)

        if gpa_match and text.upper().startswith("GPA"):
            if entries and not entries[-1].gpa:
                entries[-1].gpa = gpa_match.group(1)
            continue

        if len(text) > EDUCATION_LINE_MIN_CHARS:
            parts = _split_education_line(text)
            institution = parts[1] if len(parts) > 1 else ""
            if YEARS_ONLY_RE.fullmatch(institution):
                institution = ""
            year = YEAR_RE.search(text)
            entries.append(
                EducationEntry(
                    degree=parts[0] or text,
                    institution=institution,
                    year=year.group(0) if year else "",
                    gpa=gpa_match.group(1) if gpa_match else "",
                )
            )
        elif entries and YEAR_RE.fullmatch(text) and not entries[-1].year:
            entries[-1].year = text

    return entries


# --- Skills ---

SKILL_SPLIT_RE = re.compile(r"[,\n•●]")
SKILL_MIN_CHARS = 2
SKILL_MAX_CHARS = 49


def extract_skills(lines: List[str]) -> List[SkillEntry]:
    text = "\n".join(lines)
    skills: List[SkillEntry] = []
    for token in SKILL_SPLIT_RE.split(text):
        name = token.strip().lstrip("-*").strip()
        if SKILL_MIN_CHARS <= len(name) <= SKILL_MAX_CHARS:
            skills.append(SkillEntry(name=name))
    return skills


# --- Languages ---

LANGUAGE_SPLIT_RE = re.compile(r"[,\-–(]")


def extract_languages(lines: List[str]) -> List[LanguageEntry]:
    languages: List[LanguageEntry] = []
    for line in lines:
        name = LANGUAGE_SPLIT_RE.split(line, maxsplit=1)[0].strip()
        if not name:
            continue
        lowered = line.lower()
        if "fluent" in lowered:
            proficiency = "Fluent"
        elif "basic" in lowered:
            proficiency = "Basic"
        else:
            proficiency = "Intermediate"
        languages.append(LanguageEntry(name=name, proficiency=proficiency))
    return languages


# --- Summary ---

def extract_summary(lines: List[str]) -> str:
    return " ".join(line.strip() for line in lines)[:SUMMARY_MAX_CHARS].strip()


_SECTION_BUILDERS: Dict[str, Callable[[List[str]], SectionContent]] = {
    "summary": lambda lines: SummarySection(text=extract_summary(lines)),
    "experience": lambda lines: ExperienceSection(entries=extract_experience(lines)),
    "education": lambda lines: EducationSection(entries=extract_education(lines)),
    "skills": lambda lines: SkillsSection(entries=extract_skills(lines)),
    "languages": lambda lines: LanguagesSection(entries=extract_languages(lines)),
}


def extract_section(tag: str, lines: List[str]) -> SectionContent:
    """Run the extractor bound to a section tag."""
    return _SECTION_BUILDERS[tag](lines)
