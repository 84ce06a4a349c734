from __future__ import annotations

import logging
import re

from ats_scanner.core.config.scoring import get_scoring_value

logger = logging.getLogger(__name__)

MISSING_EMAIL = "Missing email address"
MISSING_PHONE = "Missing phone number"
RESUME_TOO_SHORT = "Resume is very short (may be incomplete)"
HIGH_SPECIAL_CHARS = "High number of special characters detected (may affect ATS parsing)"
MISSING_SECTION_HEADERS = "Missing standard section headers (Experience, Education, Skills, etc.)"

FORMATTING_ISSUES: tuple[str, ...] = (
    MISSING_EMAIL,
    MISSING_PHONE,
    RESUME_TOO_SHORT,
    HIGH_SPECIAL_CHARS,
    MISSING_SECTION_HEADERS,
)

EMAIL_RE = re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b")
PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
SPECIAL_CHAR_RE = re.compile(r"[^\w\s]")
SECTION_HEADER_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"(experience|work experience|employment|professional experience)", re.IGNORECASE),
    re.compile(r"(education|academic background|qualifications)", re.IGNORECASE),
    re.compile(r"(skills|technical skills|competencies)", re.IGNORECASE),
)


def has_email(text: str) -> bool:
    return bool(EMAIL_RE.search(text))


def has_phone(text: str) -> bool:
    return bool(PHONE_RE.search(text))


def special_char_ratio(text: str) -> float:
    return len(SPECIAL_CHAR_RE.findall(text)) / max(len(text), 1)


def count_section_headers(text: str) -> int:
    return sum(1 for pattern in SECTION_HEADER_RES if pattern.search(text))


def check_formatting(resume_text: str | None) -> list[str]:
    """Return the formatting issues found in resume text, in catalog order."""
    text = resume_text or ""
    min_chars = int(get_scoring_value("formatting.min_resume_chars", 200))
    max_ratio = float(get_scoring_value("formatting.max_special_char_ratio", 0.3))
    min_headers = int(get_scoring_value("formatting.min_section_headers", 2))

    issues: list[str] = []
    if not has_email(text):
        issues.append(MISSING_EMAIL)
    if not has_phone(text):
        issues.append(MISSING_PHONE)
    if len(text.strip()) < min_chars:
        issues.append(RESUME_TOO_SHORT)
    if special_char_ratio(text) > max_ratio:
        issues.append(HIGH_SPECIAL_CHARS)
    if count_section_headers(text) < min_headers:
        issues.append(MISSING_SECTION_HEADERS)

    logger.debug("formatting_checked issues=%d", len(issues))
    return issues
