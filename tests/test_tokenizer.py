import pytest

from casamentos.tokenizer import Tokenizer


def test_remaining_splits_all_fields():
    assert Tokenizer("a;b;c", ";").remaining() == ["a", "b", "c"]


def test_trailing_separator_gives_empty_field():
    assert Tokenizer("a;b;", ";").remaining() == ["a", "b", ""]


def test_empty_text_gives_one_empty_field():
    tok = Tokenizer("", ";")
    assert tok.has_next()
    assert tok.next() == ""
    assert not tok.has_next()


def test_next_in_order_then_exhausted():
    tok = Tokenizer("1;dois;3", ";")
    assert tok.next() == "1"
    assert tok.next() == "dois"
    assert tok.has_next()
    assert tok.next() == "3"
    assert not tok.has_next()
    with pytest.raises(IndexError):
        tok.next()


def test_remaining_after_next():
    tok = Tokenizer("x;y;z", ";")
    tok.next()
    assert tok.remaining() == ["y", "z"]
    assert not tok.has_next()


def test_iteration_consumes():
    tok = Tokenizer("a,b", ",")
    assert list(tok) == ["a", "b"]
    assert tok.remaining() == []


def test_whitespace_is_kept():
    assert Tokenizer(" a ; b\r", ";").remaining() == [" a ", " b\r"]


def test_separator_must_be_single_character():
    with pytest.raises(ValueError):
        Tokenizer("a;;b", ";;")