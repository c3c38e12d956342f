"""
Porter stemmer, as published (no NLTK extensions).

    caresses -> caress, ponies -> poni, hopping -> hop, filing -> file,
    relational -> relat, hopefulness -> hope, computers -> comput
"""

from nltk.stem import PorterStemmer

_porter = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


def stem(word: str) -> str:
    """
    Reduce a word to its Porter root, case-insensitively.

    Words of two characters or fewer are returned as-is (as in Porter's
    reference code), and the result is never empty for a non-empty input.
    """
    word = word.lower()
    if len(word) <= 2:
        return word
    return _porter.stem(word) or word
