"""
Artifact persistence
--------------------
joblib-backed persist/load for the index and the raw-document list.
Writes go to a temporary sibling first and are moved into place, so a failed
dump never leaves a truncated artifact behind.
"""

from __future__ import annotations
import io
import os
from pathlib import Path
from typing import Any, List, Union

import joblib
from loguru import logger

from tfidf_indexer.index import TfIdfIndex
from tfidf_indexer.models import Document

PathLike = Union[str, Path]


class ArtifactError(RuntimeError):
    """Artifact could not be decoded, or holds the wrong kind of object."""


def dumps(obj: Any) -> bytes:
    buf = io.BytesIO()
    joblib.dump(obj, buf)
    return buf.getvalue()


def loads(blob: bytes) -> Any:
    try:
        return joblib.load(io.BytesIO(blob))
    except Exception as e:
        raise ArtifactError(f"could not decode artifact: {type(e).__name__}: {e}") from e


def persist(obj: Any, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_bytes(dumps(obj))
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("Wrote {} -> {}", type(obj).__name__, path)
    return path


def load(path: PathLike) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"artifact not found: {path}")
    try:
        return loads(path.read_bytes())
    except ArtifactError as e:
        raise ArtifactError(f"{path}: {e}") from e


def save_index(index: TfIdfIndex, path: PathLike) -> Path:
    return persist(index, path)


def load_index(path: PathLike) -> TfIdfIndex:
    obj = load(path)
    if not isinstance(obj, TfIdfIndex):
        raise ArtifactError(f"{path}: expected TfIdfIndex, found {type(obj).__name__}")
    return obj


def save_documents(documents: List[Document], path: PathLike) -> Path:
    return persist(list(documents), path)


def load_documents(path: PathLike) -> List[Document]:
    obj = load(path)
    if not isinstance(obj, list) or not all(isinstance(d, Document) for d in obj):
        raise ArtifactError(f"{path}: expected a list of Document records")
    return obj
