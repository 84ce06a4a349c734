from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w]")


@dataclass(frozen=True)
class KeywordMatch:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def keyword_present(keyword: str, resume_lower: str) -> bool:
    """
    Check one keyword against already-lowercased resume text.

    A multi-word keyword also counts as present when each of its words shows
    up anywhere in the text, in any order. This tolerates reordering and can
    report phrases whose words only appear in unrelated sentences.
    """
    keyword_lower = keyword.lower()
    if keyword_lower in resume_lower:
        return True

    for part in keyword_lower.split():
        clean_part = _NON_WORD_RE.sub("", part)
        if part not in resume_lower and clean_part not in resume_lower:
            return False
    return True


def match_keywords(keywords: list[str], resume_text: str | None) -> KeywordMatch:
    resume_lower = (resume_text or "").lower()
    matched: list[str] = []
    missing: list[str] = []

    for keyword in keywords:
        if keyword_present(keyword, resume_lower):
            matched.append(keyword)
        else:
            missing.append(keyword)

    logger.debug("keywords_matched matched=%d missing=%d", len(matched), len(missing))
    return KeywordMatch(matched=matched, missing=missing)
