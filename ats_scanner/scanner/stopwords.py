from __future__ import annotations

STOPWORDS: frozenset[str] = frozenset({
    # Articles, conjunctions, determiners
    "a", "an", "the", "and", "or", "but", "so", "this", "that", "these", "those",
    # Prepositions
    "for", "with", "from", "into", "onto", "to", "of", "in", "on", "at", "by", "as",
    "about", "above", "after", "before", "during", "including", "through",
    "throughout", "toward", "towards", "within",
    # Auxiliaries / modals
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "should", "could", "may", "might",
    "must", "can", "cannot",
    # Quantifiers / adverbs
    "more", "most", "some", "any", "each", "every", "all", "both", "few", "many",
    "several", "such", "only", "own", "same", "than", "too", "very", "just",
    "now", "then", "here", "there",
    # Wh-words
    "when", "where", "why", "how", "what", "which", "who", "whom",
})


def is_stopword(term: str) -> bool:
    return term in STOPWORDS
