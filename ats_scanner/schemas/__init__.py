from .resume import (
    Certification,
    CustomSection,
    Language,
    PersonalInfo,
    Project,
    ResumeData,
    ResumeSection,
    SectionItem,
)
from .scan import (
    ATSScanResult,
    KeywordsRequest,
    KeywordsResponse,
    ResumeScanRequest,
    ScanReport,
    ScanRequest,
)

__all__ = [
    "ATSScanResult",
    "ScanRequest",
    "ResumeScanRequest",
    "KeywordsRequest",
    "KeywordsResponse",
    "ScanReport",
    "ResumeData",
    "PersonalInfo",
    "ResumeSection",
    "SectionItem",
    "Project",
    "Certification",
    "Language",
    "CustomSection",
]
