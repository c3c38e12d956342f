from __future__ import annotations
import argparse
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Sequence, Union

from loguru import logger

from tfidf_indexer.build_corpus import read_documents
from tfidf_indexer.index import TfIdfIndex, build_tfidf
from tfidf_indexer.log_setup import setup_logging
from tfidf_indexer.models import Document, DocumentTerms
from tfidf_indexer.store import save_documents, save_index
from tfidf_indexer.tokenizer import DocumentTokenizer

DEFAULT_SOURCE = Path("datasets/sample.csv")
DEFAULT_COLUMN = "reviews.text"
ARTIFACTS      = Path("artifacts")
DEFAULT_INDEX  = ARTIFACTS / "tfidf_index.joblib"
DEFAULT_DOCS   = ARTIFACTS / "documents.joblib"


def tokenize_document(document: Document) -> DocumentTerms:
    tf = DocumentTokenizer(document.text.splitlines()).tokenize()
    return DocumentTerms(document.doc_id, document.text, tf)


def tokenize_documents(documents: Sequence[Document], workers: int = 1) -> List[DocumentTerms]:
    """
    Tokenize every document. Documents share no state here, so with
    ``workers > 1`` they're spread over a thread pool; results keep input order.
    """
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(tokenize_document, documents))
    return [tokenize_document(d) for d in documents]


def index(source: Union[str, Path], column: str,
          index_path: Union[str, Path], documents_path: Union[str, Path],
          workers: int = 1) -> TfIdfIndex:
    """
    Read -> tokenize -> DF -> TF-IDF -> persist.

    Nothing is written unless every stage before persistence succeeds.
    """
    source = Path(source)
    if not source.is_file():
        logger.error("Source {} does not exist or is not a file", source)
        raise FileNotFoundError(f"source not found: {source}")

    logger.info("Opening {} for reading", source)
    documents = read_documents(source, column)

    logger.info("Tokenizing {:,} documents (workers={})", len(documents), workers)
    terms = tokenize_documents(documents, workers=workers)

    logger.info("Computing DF and Tf-Idf weights")
    tfidf = build_tfidf(terms)
    logger.info("Tf-Idf done: {} documents, vocab size={}, entries={}",
                tfidf.n, len(tfidf.vocabulary), tfidf.size())

    logger.info("Writing the index file: {}", index_path)
    save_index(tfidf, index_path)

    logger.info("Persisting the documents: {}", documents_path)
    save_documents([t.to_document() for t in terms], documents_path)

    logger.info("Indexing complete")
    return tfidf


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Build a TF-IDF index from a CSV text column.")
    ap.add_argument("--source", type=Path, default=DEFAULT_SOURCE)
    ap.add_argument("--column", default=DEFAULT_COLUMN)
    ap.add_argument("--index-out", type=Path, default=DEFAULT_INDEX)
    ap.add_argument("--docs-out", type=Path, default=DEFAULT_DOCS)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    setup_logging(args.verbose)
    index(args.source, args.column, args.index_out, args.docs_out, workers=args.workers)


if __name__ == "__main__":
    main()
