"""
Corpus-level document frequency and the TF-IDF index
-----------------------------------------------------
The index owns the vocabulary (append-only, first-seen order) and a sparse
(doc_id, vocab_id) -> weight table. Only pairs where the term occurs in the
document are stored.

Weighting (kept as-is for compatibility with existing index consumers):

    idf(t)    = ln(N + 1/DF(t) + 1)
    w(d, t)   = round_half_up(TF(d, t) * idf(t), 4)

This is NOT the textbook ln(N / (df + 1)); DF here is already a fraction of N.
"""

from __future__ import annotations
import math
import threading
from collections import Counter
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np
from scipy.sparse import csr_matrix

from tfidf_indexer.models import DocumentTerms, TfIdfItem
from tfidf_indexer.utils_text import round_half_up

NOT_FOUND = -1


class EmptyCorpusError(ValueError):
    """Raised when document frequencies are requested for zero documents."""


def compute_df(documents: Sequence[DocumentTerms]) -> Dict[str, float]:
    """
    Fraction of documents containing each term.

    Must only run once every document has been tokenized.
    """
    n = len(documents)
    if n == 0:
        raise EmptyCorpusError("empty corpus: cannot compute document frequencies for 0 documents")

    containing: Counter = Counter()
    for doc in documents:
        containing.update(doc.tf.keys())

    return {term: count / n for term, count in containing.items()}


def idf(n: int, df: float) -> float:
    if df <= 0:
        raise ValueError(f"document frequency must be in (0, 1], got {df}")
    return math.log(n + 1 / df + 1)


def tf_idf(tf: float, n: int, df: float) -> float:
    return round_half_up(tf * idf(n, df))


class TfIdfIndex:
    def __init__(self, n: int, document_frequencies: Dict[str, float]):
        self._n = n
        self._df: Dict[str, float] = dict(document_frequencies)
        self._vocab: List[str] = []
        self._vocab_ids: Dict[str, int] = {}
        self._weights: Dict[Tuple[int, int], float] = {}
        self._lock = threading.Lock()

    def add(self, doc_id: int, term: str, weight: float) -> int:
        """
        Store ``weight`` for (doc_id, term), registering ``term`` if unseen.

        Re-adding the same pair overwrites the weight. Returns the term's vocab id.
        """
        if not 0 <= doc_id < self._n:
            raise ValueError(f"doc_id {doc_id} outside corpus of {self._n} documents")

        # single writer: each distinct term gets exactly one id
        with self._lock:
            vocab_id = self._vocab_ids.get(term)
            if vocab_id is None:
                vocab_id = len(self._vocab)
                self._vocab.append(term)
                self._vocab_ids[term] = vocab_id
            self._weights[(doc_id, vocab_id)] = weight
        return vocab_id

    def index_of(self, term: str) -> int:
        return self._vocab_ids.get(term, NOT_FOUND)

    @property
    def n(self) -> int:
        """Number of documents in the corpus."""
        return self._n

    def size(self) -> int:
        """Number of stored (doc, term) weights."""
        return len(self._weights)

    def __len__(self) -> int:
        return self.size()

    def df(self, term: str) -> float:
        return self._df.get(term, 0.0)

    def weight(self, doc_id: int, term: str) -> float:
        vocab_id = self.index_of(term)
        if vocab_id == NOT_FOUND:
            return 0.0
        return self._weights.get((doc_id, vocab_id), 0.0)

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        return tuple(self._vocab)

    @property
    def document_frequencies(self) -> Dict[str, float]:
        return dict(self._df)

    @property
    def weights(self) -> Dict[Tuple[int, int], float]:
        return dict(self._weights)

    def __iter__(self) -> Iterator[TfIdfItem]:
        # order follows the table's insertion order but callers must not rely on it
        for (doc_id, vocab_id), weight in self._weights.items():
            yield TfIdfItem(self._vocab[vocab_id], doc_id, weight)

    def to_sparse(self) -> csr_matrix:
        """Document x vocabulary matrix of the stored weights."""
        size = len(self._weights)
        rows = np.fromiter((k[0] for k in self._weights), dtype=np.int64, count=size)
        cols = np.fromiter((k[1] for k in self._weights), dtype=np.int64, count=size)
        data = np.fromiter(self._weights.values(), dtype=np.float64, count=size)
        return csr_matrix((data, (rows, cols)), shape=(self._n, len(self._vocab)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, TfIdfIndex):
            return NotImplemented
        return (self._n == other._n and self._vocab == other._vocab
                and self._df == other._df and self._weights == other._weights)

    def __repr__(self) -> str:
        return f"TfIdfIndex(n={self._n}, vocab={len(self._vocab)}, entries={len(self._weights)})"

    # locks don't pickle; persist the tables only
    def __getstate__(self):
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.Lock()


def build_tfidf(documents: Sequence[DocumentTerms]) -> TfIdfIndex:
    """DF over the whole corpus, then one weight per (document, term) in doc order."""
    df = compute_df(documents)
    index = TfIdfIndex(len(documents), df)
    for doc in documents:
        for term, tf in doc.tf.items():
            index.add(doc.doc_id, term, tf_idf(tf, index.n, df[term]))
    return index
