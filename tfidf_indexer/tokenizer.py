from __future__ import annotations
from collections import Counter
from functools import reduce
from typing import Dict, Iterable, List, Set

from loguru import logger

from tfidf_indexer.stemmer import stem
from tfidf_indexer.stopwords import is_content
from tfidf_indexer.utils_text import line_to_tokens, round_ceiling


def normalize(tokens: Iterable[str]) -> List[str]:
    """Stem each raw token, then drop stopwords (in that order)."""
    return [t for t in map(stem, tokens) if is_content(t)]


def term_counts(line: str) -> Counter:
    """Occurrences of each surviving term within a single line."""
    return Counter(normalize(line_to_tokens(line)))


def merge_counts(left: Counter, right: Counter) -> Counter:
    """
    Sum two term counters into a new one.

    Associative and commutative, so lines (or shards of lines) can be counted
    independently and folded in any grouping.
    """
    merged = Counter(left)
    merged.update(right)
    return merged


class DocumentTokenizer:
    """
    Turns the lines of one document into a term -> TF map.

    TF is the term's count divided by the number of DISTINCT terms in the
    document (not by the total token count), rounded up at 4 decimals.
    """

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self._counts: Counter = Counter()
        self._tf: Dict[str, float] = {}

    def tokenize(self) -> Dict[str, float]:
        # a second pass would double-count; keep the first result
        if self._tf:
            logger.warning("Document already tokenized; tokenize() should only be called once")
            return self._tf

        self._counts = reduce(merge_counts, map(term_counts, self.lines), Counter())

        distinct = len(self._counts)
        self._tf = {
            term: round_ceiling(count / distinct)
            for term, count in self._counts.items()
        }
        return self._tf

    @property
    def tf(self) -> Dict[str, float]:
        return self._tf

    @property
    def counts(self) -> Counter:
        """Raw per-term occurrence counts behind ``tf``."""
        return self._counts

    def tokens(self) -> Set[str]:
        return set(self._tf)


def tokenize(lines: Iterable[str]) -> Dict[str, float]:
    """Shortcut for ``DocumentTokenizer(lines).tokenize()``."""
    return DocumentTokenizer(lines).tokenize()
