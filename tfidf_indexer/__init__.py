"""TF-IDF term-weighting indexer for short text documents."""

from tfidf_indexer.models import Document, DocumentTerms, TfIdfItem
from tfidf_indexer.stemmer import stem
from tfidf_indexer.stopwords import is_content
from tfidf_indexer.tokenizer import DocumentTokenizer, tokenize
from tfidf_indexer.index import (
    NOT_FOUND,
    EmptyCorpusError,
    TfIdfIndex,
    build_tfidf,
    compute_df,
)

__all__ = [
    "Document",
    "DocumentTerms",
    "TfIdfItem",
    "stem",
    "is_content",
    "DocumentTokenizer",
    "tokenize",
    "NOT_FOUND",
    "EmptyCorpusError",
    "TfIdfIndex",
    "build_tfidf",
    "compute_df",
]
