from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ResumeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PersonalInfo(_ResumeModel):
    full_name: str = ""
    job_title: str | None = None
    email: str = ""
    phone: str = ""
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None
    summary: str = ""


class SectionItem(_ResumeModel):
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    date: str | None = None


class ResumeSection(_ResumeModel):
    id: str = ""
    title: str = ""
    type: str = "custom"
    is_visible: bool = True
    items: list[SectionItem] = Field(default_factory=list)


class Project(_ResumeModel):
    title: str | None = None
    role: str | None = None
    company: str | None = None
    description: str | None = None


class Certification(_ResumeModel):
    name: str | None = None
    issuer: str | None = None


class Language(_ResumeModel):
    language: str | None = None
    proficiency: str | None = None


class CustomSection(_ResumeModel):
    title: str = ""
    items: list[SectionItem] = Field(default_factory=list)


class ResumeData(_ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    sections: list[ResumeSection] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)
