import pytest

from tfidf_indexer.build_index import tokenize_document
from tfidf_indexer.index import build_tfidf
from tfidf_indexer.models import Document
from tfidf_indexer.store import (
    ArtifactError,
    dumps,
    load,
    load_documents,
    load_index,
    loads,
    persist,
    save_documents,
    save_index,
)


@pytest.fixture
def documents():
    return [Document(0, "the cat sat on the mat"), Document(1, "the dog sat on the log")]


@pytest.fixture
def index(documents):
    return build_tfidf([tokenize_document(d) for d in documents])


def test_blob_round_trip(index):
    restored = loads(dumps(index))
    assert restored == index
    assert restored.vocabulary == index.vocabulary
    assert restored.document_frequencies == index.document_frequencies
    assert restored.weights == index.weights
    assert restored.n == index.n


def test_index_file_round_trip(index, tmp_path):
    path = save_index(index, tmp_path / "nested" / "tfidf_index.joblib")
    assert path.exists()
    assert not path.with_name(path.name + ".tmp").exists()
    assert load_index(path) == index


def test_documents_file_round_trip(documents, tmp_path):
    path = save_documents(documents, tmp_path / "documents.joblib")
    assert load_documents(path) == documents


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "nope.joblib")


def test_load_corrupt(tmp_path):
    path = tmp_path / "broken.joblib"
    path.write_bytes(b"definitely not a pickle")
    with pytest.raises(ArtifactError):
        load_index(path)


def test_load_wrong_type(documents, tmp_path):
    path = persist({"not": "an index"}, tmp_path / "other.joblib")
    with pytest.raises(ArtifactError, match="expected TfIdfIndex"):
        load_index(path)
    with pytest.raises(ArtifactError):
        load_documents(path)


def test_failed_persist_keeps_previous_artifact(index, tmp_path):
    path = save_index(index, tmp_path / "tfidf_index.joblib")
    with pytest.raises(Exception):
        persist(lambda: None, path)  # lambdas don't pickle
    assert load_index(path) == index
