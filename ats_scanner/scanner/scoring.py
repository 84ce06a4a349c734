from __future__ import annotations

import math

from ats_scanner.core.config.scoring import get_scoring_value
from ats_scanner.schemas.scan import ScoreBand

_INTERPRETATIONS: dict[str, str] = {
    "excellent": (
        "Excellent! Your resume is well-optimized for ATS systems and aligns well "
        "with the job description."
    ),
    "good": (
        "Good match. Review the suggestions above to further improve your ATS "
        "compatibility and keyword alignment."
    ),
    "needs_improvement": (
        "Your resume needs improvement. Focus on the top improvements and missing "
        "keywords to enhance your ATS compatibility."
    ),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compose_score(matched_count: int, total_keywords: int, formatting_issue_count: int) -> int:
    """
    Combine keyword coverage and formatting issues into a 0-100 score.

    Keyword coverage contributes up to 80 points; formatting contributes 20
    points minus 5 per issue, never below zero.
    """
    keyword_weight = float(get_scoring_value("scoring.keyword_weight", 80))
    formatting_max = float(get_scoring_value("scoring.formatting_max", 20))
    penalty = float(get_scoring_value("scoring.formatting_penalty_per_issue", 5))

    keyword_score = (matched_count / total_keywords) * keyword_weight if total_keywords > 0 else 0.0
    formatting_score = max(0.0, formatting_max - formatting_issue_count * penalty)
    total = _round_half_up(keyword_score + formatting_score)
    return min(100, max(0, total))


def score_band(score: int) -> ScoreBand:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    return "needs_improvement"


def score_interpretation(score: int) -> str:
    return _INTERPRETATIONS[score_band(score)]
