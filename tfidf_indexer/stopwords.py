"""
English stopword filter.

Tokens are stemmed *before* they reach the filter, so the set carries both the
plain stopwords and their stemmed forms ("was" -> "wa", "becomes" -> "becom").
Changing that order changes which terms get excluded; review both together.
"""

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from tfidf_indexer.stemmer import stem

# scikit-learn's list carries some ordinary vocabulary; keep those indexable
CONTENT_WORDS = frozenset([
    "bill", "bottom", "call", "computer", "cry", "describe", "detail", "empty",
    "fill", "find", "fire", "front", "full", "give", "interest", "mill", "move",
    "name", "part", "serious", "show", "side", "sincere", "system", "take",
    "thick", "thin", "top",
])

BASE_STOP_WORDS = frozenset(ENGLISH_STOP_WORDS) - CONTENT_WORDS
STOP_WORDS = BASE_STOP_WORDS | frozenset(stem(w) for w in BASE_STOP_WORDS)


def is_content(word: str) -> bool:
    """True when ``word`` is not a stopword (case-insensitive)."""
    return word.lower() not in STOP_WORDS
