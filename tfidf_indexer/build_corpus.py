from __future__ import annotations
import csv
from pathlib import Path
from typing import List, Set, Union

import pandas as pd
from loguru import logger

from tfidf_indexer.models import Document


def _read_source(path: Path, column: str) -> pd.DataFrame:
    """
    Load the CSV (header row required) and validate the text column.
    Every field is read as a string; empty cells stay "" rather than NaN.
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError:
        logger.error("[build_corpus] source not found at {}", path)
        raise

    if column not in df.columns:
        raise ValueError(
            f"[build_corpus] source {path} is missing column {column!r} "
            f"(found: {sorted(df.columns)})"
        )
    return df


def _short_rows(path: Path, width: int) -> Set[int]:
    """
    Data-row positions with fewer than ``width`` fields.

    pandas pads a ragged row with "" just like a real empty cell, so the
    field count is taken from the raw records. Blank lines are skipped, as
    pandas skips them.
    """
    with open(path, newline="", encoding="utf-8") as f:
        records = (r for r in csv.reader(f) if r)
        next(records, None)  # header
        return {i for i, r in enumerate(records) if len(r) < width}


def read_documents(path: Union[str, Path], column: str) -> List[Document]:
    """
    One Document per data row, doc_id = 0-based row position (header excluded).

    Args:
        path: CSV source file.
        column: Name of the column holding the document text.

    Returns:
        List[Document]: In file order.

    Raises:
        ValueError: the column is absent, or a row ends before reaching it.
    """
    path = Path(path)
    df = _read_source(path, column)
    short = _short_rows(path, df.columns.get_loc(column) + 1)

    documents: List[Document] = []
    for doc_id, value in enumerate(df[column].tolist()):
        # a ragged row is a data error, not an empty document
        if doc_id in short:
            raise ValueError(f"[build_corpus] row {doc_id}: column {column!r} has no value")
        documents.append(Document(doc_id, value))

    logger.info("[build_corpus] Read {:,} documents from {}", len(documents), path)
    return documents
