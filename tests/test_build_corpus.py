import pytest

from tfidf_indexer.build_corpus import read_documents
from tfidf_indexer.models import Document


def test_one_document_per_row(write_csv):
    path = write_csv([
        '1,"Great product, works well."',
        '2,""',
        '3,"Line one\nline two"',
    ])
    docs = read_documents(path, "reviews.text")
    assert docs == [
        Document(0, "Great product, works well."),
        Document(1, ""),
        Document(2, "Line one\nline two"),
    ]


def test_missing_column(write_csv):
    path = write_csv(['1,"hello"'], header="id,body")
    with pytest.raises(ValueError, match="missing column"):
        read_documents(path, "reviews.text")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_documents(tmp_path / "absent.csv", "reviews.text")


def test_short_row_is_a_row_error(write_csv):
    path = write_csv(['1,"hello"', "2"])
    with pytest.raises(ValueError, match="row 1"):
        read_documents(path, "reviews.text")


def test_blank_lines_do_not_shift_rows(write_csv):
    path = write_csv(['1,"hello"', "", '2,""'])
    assert read_documents(path, "reviews.text") == [Document(0, "hello"), Document(1, "")]
