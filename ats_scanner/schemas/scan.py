from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ats_scanner.core.config import settings

from .resume import ResumeData

ScoreBand = Literal["excellent", "good", "needs_improvement"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ATSScanResult(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    score: int = Field(default=0, ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    formatting_issues: list[str] = Field(default_factory=list)


class ScanRequest(_CamelModel):
    resume_text: str = Field(default="", max_length=settings.max_input_chars)
    job_description: str = Field(default="", max_length=settings.max_input_chars)


class ResumeScanRequest(_CamelModel):
    resume: ResumeData
    job_description: str = Field(default="", max_length=settings.max_input_chars)


class KeywordsRequest(_CamelModel):
    job_description: str = Field(default="", max_length=settings.max_input_chars)


class KeywordsResponse(_CamelModel):
    keywords: list[str] = Field(default_factory=list)


class ScanReport(_CamelModel):
    result: ATSScanResult
    band: ScoreBand
    interpretation: str
