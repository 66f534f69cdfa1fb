import io

import pytest

from exadrums.parsing import iter_lines, iter_tokens, read_token


def test_read_token_consumes_delimiter():
    stream = io.StringIO("kick,snare")
    assert read_token(stream, ",") == "kick"
    assert read_token(stream, ",") == "snare"
    assert read_token(stream, ",") is None


def test_empty_token_between_delimiters():
    stream = io.StringIO("a,,b")
    assert list(iter_tokens(stream, ",")) == ["a", "", "b"]


def test_trailing_delimiter_gives_no_extra_token():
    assert list(iter_tokens(io.StringIO("a;b;"), ";")) == ["a", "b"]


def test_iter_lines():
    assert list(iter_lines(io.StringIO("one\ntwo\n\nthree"))) == ["one", "two", "", "three"]


def test_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []
    assert read_token(io.StringIO("")) is None


def test_bad_delimiter():
    with pytest.raises(ValueError):
        read_token(io.StringIO("abc"), "ab")
    with pytest.raises(ValueError):
        list(iter_tokens(io.StringIO("abc"), ""))