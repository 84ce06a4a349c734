from __future__ import annotations

import logging

from ats_scanner.core.config.scoring import get_scoring_value
from ats_scanner.schemas.scan import ATSScanResult, ScanReport
from ats_scanner.scanner.formatting import check_formatting
from ats_scanner.scanner.keywords import extract_keywords
from ats_scanner.scanner.matcher import match_keywords
from ats_scanner.scanner.scoring import compose_score, score_band, score_interpretation

logger = logging.getLogger(__name__)


def scan_resume(resume_text: str | None, job_description: str | None) -> ATSScanResult:
    """
    Score resume text against a job description.

    An empty or whitespace-only job description yields a zero result without
    running the formatting checks. Every other input produces a fully defined
    result; nothing here raises for string input.
    """
    if not job_description or not job_description.strip():
        return ATSScanResult(score=0, matched_keywords=[], missing_keywords=[], formatting_issues=[])

    resume_text = resume_text or ""
    keywords = extract_keywords(job_description)
    match = match_keywords(keywords, resume_text)
    formatting_issues = check_formatting(resume_text)
    score = compose_score(len(match.matched), len(keywords), len(formatting_issues))

    max_matched = int(get_scoring_value("matching.max_matched", 30))
    max_missing = int(get_scoring_value("matching.max_missing", 20))

    logger.debug(
        "ats_scan_completed score=%s keywords=%s matched=%s missing=%s issues=%s",
        score,
        len(keywords),
        len(match.matched),
        len(match.missing),
        len(formatting_issues),
    )
    return ATSScanResult(
        score=score,
        matched_keywords=match.matched[:max_matched],
        missing_keywords=match.missing[:max_missing],
        formatting_issues=formatting_issues,
    )


def build_scan_report(resume_text: str | None, job_description: str | None) -> ScanReport:
    result = scan_resume(resume_text, job_description)
    return ScanReport(
        result=result,
        band=score_band(result.score),
        interpretation=score_interpretation(result.score),
    )
