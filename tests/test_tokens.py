import pytest

from cubescape.tokens import split_keep, split_keep_collapsed


def test_split_keep_simple():
    assert split_keep("a b", " ") == ["a", " ", "b"]


def test_split_keep_each_delimiter_is_a_token():
    assert split_keep("x||y", "|") == ["x", "|", "|", "y"]


def test_split_keep_empty_text():
    assert split_keep("", " ,") == []


def test_split_keep_no_delimiters():
    assert split_keep("word", ",") == ["word"]


@pytest.mark.parametrize(
    "text, charset",
    [("a b,c", " ,"), ("  lead", " "), ("trail,,", ","), ("|a|b|", "|"), ("", "x")],
)
def test_split_keep_round_trip(text, charset):
    tokens = split_keep(text, charset)
    assert "".join(tokens) == text
    assert all(tokens)
    for token in tokens:
        if token[0] in charset:
            assert len(token) == 1
        else:
            assert not any(ch in charset for ch in token)


def test_collapsed_merges_repeated_delimiter():
    assert split_keep_collapsed("a   b", " ") == ["a", " ", "b"]


def test_collapsed_keeps_different_delimiters():
    assert split_keep_collapsed("a  ,,b", " ,") == ["a", " ", ",", "b"]


def test_collapsed_empty_text():
    assert split_keep_collapsed("", " ") == []


@pytest.mark.parametrize("text", ["a||b||c", "||x", "y||", "p|q"])
def test_collapsed_has_no_adjacent_equal_delimiters(text):
    tokens = split_keep_collapsed(text, "|")
    for left, right in zip(tokens, tokens[1:]):
        assert not (left == right == "|")
    assert "".join(tokens).replace("|", "") == text.replace("|", "")