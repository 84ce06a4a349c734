from .formatting import FORMATTING_ISSUES, check_formatting
from .keywords import extract_keywords, rank_keywords
from .matcher import KeywordMatch, match_keywords
from .scan import build_scan_report, scan_resume
from .scoring import compose_score, score_band, score_interpretation
from .stopwords import STOPWORDS

__all__ = [
    "STOPWORDS",
    "FORMATTING_ISSUES",
    "extract_keywords",
    "rank_keywords",
    "KeywordMatch",
    "match_keywords",
    "check_formatting",
    "compose_score",
    "score_band",
    "score_interpretation",
    "scan_resume",
    "build_scan_report",
]
