from typing import Annotated, List, Literal, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DocumentKind = Literal["pdf", "docx", "txt"]
SectionTag = Literal["summary", "experience", "education", "skills", "languages"]
Proficiency = Literal["Basic", "Intermediate", "Fluent"]

DEFAULT_SKILL_LEVEL = 3  # 1-5 scale, resumes carry no proficiency signal
SUMMARY_MAX_CHARS = 300


def new_item_id() -> str:
    return uuid4().hex


class RecordModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(RecordModel):
    full_name: str = ""  # first non-empty line; low confidence, user is expected to correct it
    email: str = ""
    phone: str = ""
    address: str = ""
    profile_url: str = ""  # linkedin.com/in/<handle>
    homepage: str = ""
    photo: str = ""


class ExperienceEntry(RecordModel):
    id: str = Field(default_factory=new_item_id)
    company: str = ""
    role: str = ""
    start_date: str = ""
    end_date: str = Field(default="", description="Always empty when current is true")
    current: bool = False
    description: str = ""  # one bullet line per row, newline terminated


class EducationEntry(RecordModel):
    id: str = Field(default_factory=new_item_id)
    institution: str = ""
    degree: str = ""
    year: str = ""
    gpa: str = ""


class SkillEntry(RecordModel):
    id: str = Field(default_factory=new_item_id)
    name: str
    level: int = Field(default=DEFAULT_SKILL_LEVEL, ge=1, le=5)


class LanguageEntry(RecordModel):
    id: str = Field(default_factory=new_item_id)
    name: str
    proficiency: Proficiency = "Intermediate"


class ParsedRecord(RecordModel):
    """Structured candidate profile returned by one parse call."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = Field(default="", max_length=SUMMARY_MAX_CHARS)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)


# --- Section payloads exchanged between extractors and the assembler ---

class SummarySection(BaseModel):
    kind: Literal["summary"] = "summary"
    text: str = ""


class ExperienceSection(BaseModel):
    kind: Literal["experience"] = "experience"
    entries: List[ExperienceEntry] = Field(default_factory=list)


class EducationSection(BaseModel):
    kind: Literal["education"] = "education"
    entries: List[EducationEntry] = Field(default_factory=list)


class SkillsSection(BaseModel):
    kind: Literal["skills"] = "skills"
    entries: List[SkillEntry] = Field(default_factory=list)


class LanguagesSection(BaseModel):
    kind: Literal["languages"] = "languages"
    entries: List[LanguageEntry] = Field(default_factory=list)


SectionContent = Annotated[
    Union[SummarySection, ExperienceSection, EducationSection, SkillsSection, LanguagesSection],
    Field(discriminator="kind"),
]
