import pytest

from tfidf_indexer.stemmer import stem


@pytest.mark.parametrize("word,expected", [
    ("caresses", "caress"),
    ("ponies", "poni"),
    ("caress", "caress"),
    ("cats", "cat"),
    ("feed", "feed"),
    ("agreed", "agre"),
    ("plastered", "plaster"),
    ("motoring", "motor"),
    ("sing", "sing"),
    ("hopping", "hop"),
    ("running", "run"),
    ("falling", "fall"),
    ("hissing", "hiss"),
    ("filing", "file"),
    ("happy", "happi"),
    ("sky", "sky"),
    ("relational", "relat"),
    ("hopefulness", "hope"),
    ("generalization", "gener"),
    ("computers", "comput"),
    ("controlling", "control"),
])
def test_porter_reductions(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize("word", ["connect", "connected", "connecting", "connection", "connections"])
def test_inflections_share_a_root(word):
    assert stem(word) == "connect"


@pytest.mark.parametrize("word", ["cat", "sat", "mat", "dog", "log", "the", "on"])
def test_short_plain_words_unchanged(word):
    assert stem(word) == word


def test_case_insensitive():
    assert stem("Cats") == stem("cats") == "cat"


def test_never_empty_for_non_empty_input():
    words = ["s", "is", "ss", "ies", "sses", "ed", "ing", "eed", "y", "ying", "ation", "e", "ll", "2019s"]
    for word in words:
        assert stem(word), word
    assert stem("") == ""


def test_deterministic():
    assert [stem("organizations")] * 3 == [stem("organizations") for _ in range(3)]
