from __future__ import annotations

import logging
import re
from typing import Iterable

from ats_scanner.core.config.scoring import get_scoring_value
from ats_scanner.scanner.stopwords import is_stopword

logger = logging.getLogger(__name__)

# Two leading letters, then alphanumeric chunks joined by one of + / . &
# ("node.js", "ci/cd", "python3").
TOKEN_RUN_RE = re.compile(r"\b[a-z]{2}[a-z0-9]*(?:[+/.&][a-z0-9]{2,})*\b")
CAPITALIZED_PHRASE_RE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
QUOTED_PHRASE_RE = re.compile(r'"([^"]+)"')

_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s+/.&-]")
_WHITESPACE_RE = re.compile(r"\s+")
_DIGITS_ONLY_RE = re.compile(r"\d+")


def clean_candidate(raw: str) -> str:
    cleaned = _DISALLOWED_CHARS_RE.sub("", raw).lower()
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def is_acceptable_keyword(candidate: str) -> bool:
    min_length = int(get_scoring_value("keywords.min_length", 2))
    max_length = int(get_scoring_value("keywords.max_length", 30))
    if not min_length <= len(candidate) <= max_length:
        return False
    if is_stopword(candidate):
        return False
    return not _DIGITS_ONLY_RE.fullmatch(candidate)


def _token_runs(text: str) -> list[str]:
    return TOKEN_RUN_RE.findall(text.lower())


def _capitalized_phrases(text: str) -> list[str]:
    return [match.lower() for match in CAPITALIZED_PHRASE_RE.findall(text)]


def _quoted_words(text: str) -> list[str]:
    min_length = int(get_scoring_value("keywords.quoted_phrase_min_length", 2))
    max_length = int(get_scoring_value("keywords.quoted_phrase_max_length", 50))
    words: list[str] = []
    for phrase in QUOTED_PHRASE_RE.findall(text):
        phrase = phrase.lower().strip()
        if not min_length <= len(phrase) <= max_length:
            continue
        words.extend(phrase.split())
    return words


def rank_keywords(keywords: Iterable[str], limit: int | None = None) -> list[str]:
    """Order keywords longest first, alphabetically within equal lengths."""
    ranked = sorted(set(keywords), key=lambda term: (-len(term), term))
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def extract_keywords(job_description: str | None) -> list[str]:
    """
    Extract ranked candidate keywords from a job description.

    Candidates come from three independent scans (lowercase token runs,
    capitalized phrases, words inside double quotes) and are unioned before
    ranking, so the result depends only on the input text.
    """
    if not job_description:
        return []

    candidates = [
        *_token_runs(job_description),
        *_capitalized_phrases(job_description),
        *_quoted_words(job_description),
    ]

    keywords: set[str] = set()
    for raw in candidates:
        cleaned = clean_candidate(raw)
        if is_acceptable_keyword(cleaned):
            keywords.add(cleaned)

    limit = int(get_scoring_value("keywords.max_extracted", 50))
    ranked = rank_keywords(keywords, limit=limit)
    logger.debug("keywords_extracted candidates=%d unique=%d kept=%d", len(candidates), len(keywords), len(ranked))
    return ranked
