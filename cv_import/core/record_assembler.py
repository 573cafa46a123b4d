from typing import Iterable

from cv_import.core.schemas import (
    EducationSection,
    ExperienceSection,
    LanguagesSection,
    ParsedRecord,
    PersonalInfo,
    SectionContent,
    SkillsSection,
    SummarySection,
)


def assemble_record(contact: PersonalInfo, sections: Iterable[SectionContent]) -> ParsedRecord:
    """
    Compose contact info and section payloads into one record.
    A section seen twice overwrites the earlier result.
    """
    record = ParsedRecord(personal_info=contact)
    for section in sections:
        if isinstance(section, SummarySection):
            record.summary = section.text
        elif isinstance(section, ExperienceSection):
            record.experience = section.entries
        elif isinstance(section, EducationSection):
            record.education = section.entries
        elif isinstance(section, SkillsSection):
            record.skills = section.entries
        elif isinstance(section, LanguagesSection):
            record.languages = section.entries
    return record
