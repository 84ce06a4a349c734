import logging

from fastapi import APIRouter, Request

from ats_scanner.core.rate_limit import rate_limit
from ats_scanner.normalize.resume_text import resume_data_to_text
from ats_scanner.scanner import build_scan_report, extract_keywords, scan_resume
from ats_scanner.schemas.scan import (
    ATSScanResult,
    KeywordsRequest,
    KeywordsResponse,
    ResumeScanRequest,
    ScanReport,
    ScanRequest,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _log_scan(route: str, result: ATSScanResult) -> None:
    logger.info(
        "ats_scan route=%s score=%s matched=%s missing=%s issues=%s",
        route,
        result.score,
        len(result.matched_keywords),
        len(result.missing_keywords),
        len(result.formatting_issues),
    )


@router.post("/ats/scan", response_model=ATSScanResult)
@rate_limit()
async def ats_scan(request: Request, payload: ScanRequest):
    _ = request
    result = scan_resume(payload.resume_text, payload.job_description)
    _log_scan("scan", result)
    return result


@router.post("/ats/scan-resume", response_model=ATSScanResult)
@rate_limit()
async def ats_scan_resume(request: Request, payload: ResumeScanRequest):
    _ = request
    resume_text = resume_data_to_text(payload.resume)
    result = scan_resume(resume_text, payload.job_description)
    _log_scan("scan-resume", result)
    return result


@router.post("/ats/report", response_model=ScanReport)
@rate_limit()
async def ats_report(request: Request, payload: ScanRequest):
    _ = request
    report = build_scan_report(payload.resume_text, payload.job_description)
    _log_scan("report", report.result)
    return report


@router.post("/ats/keywords", response_model=KeywordsResponse)
@rate_limit()
async def ats_keywords(request: Request, payload: KeywordsRequest):
    _ = request
    keywords = extract_keywords(payload.job_description)
    logger.info("ats_keywords extracted=%s", len(keywords))
    return KeywordsResponse(keywords=keywords)
