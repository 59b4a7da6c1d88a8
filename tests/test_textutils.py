import pytest

from casamentos.textutils import is_number, ltrim, rtrim, string_compare, trim


def test_ltrim_only_left():
    assert ltrim("  \t ana  ") == "ana  "


def test_rtrim_only_right():
    assert rtrim("  ana \r\n") == "  ana"


@pytest.mark.parametrize("text", ["ana", " ana", "ana ", "\t\nana\v\f\r "])
def test_trim(text):
    assert trim(text) == "ana"


def test_trim_all_space():
    assert trim(" \t\n ") == ""


def test_trim_keeps_inner_space():
    assert trim("  ana maria  ") == "ana maria"


def test_string_compare_ignores_case():
    assert string_compare("ana", "Bruno")
    assert string_compare("Ana", "bruno")
    assert not string_compare("Bruno", "ana")


def test_string_compare_equal_is_not_less():
    assert not string_compare("Ana", "ana")
    assert not string_compare("ana", "ANA")


def test_string_compare_is_asymmetric():
    pairs = [("carla", "Carlos"), ("z", "A"), ("abc", "abcd")]
    for first, second in pairs:
        assert string_compare(first, second) != string_compare(second, first)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("123", True), ("0", True), ("", False), ("12a", False), ("-1", False), ("1,5", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected