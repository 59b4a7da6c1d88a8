import pytest

from casamentos.numfmt import format_currency, format_double, parse_double


def test_parse_comma_decimal():
    assert parse_double("12,5") == 12.5


def test_parse_integer_text():
    assert parse_double("300") == 300.0


def test_parse_stops_at_first_non_number_character():
    assert parse_double("7,25abc") == parse_double("7,25")
    assert parse_double("1.234,56") == parse_double("1")


def test_parse_skips_leading_whitespace():
    assert parse_double("   42,0") == parse_double("42,0")


@pytest.mark.parametrize("text", ["", "abc", "   ", ";"])
def test_parse_without_number_gives_zero(text):
    assert parse_double(text) == 0.0


def test_parse_sign():
    assert parse_double("-3,5") == -parse_double("3,5")


def test_currency_has_two_decimals_and_comma():
    assert format_currency(1500.0) == "1500,00"


def test_double_has_six_decimals():
    text = format_double(2.5)
    integer, decimals = text.split(",")
    assert integer == "2"
    assert len(decimals) == 6


def test_no_thousands_grouping():
    text = format_currency(1234567.0)
    assert "." not in text
    assert text.startswith("1234567")


@pytest.mark.parametrize("value", [0.0, 1.25, 99.5, 1234.75, -20.5])
def test_currency_round_trip(value):
    assert parse_double(format_currency(value)) == pytest.approx(round(value, 2))


@pytest.mark.parametrize("value", [0.125, 3.5, 1000.0625])
def test_double_round_trip(value):
    assert parse_double(format_double(value)) == pytest.approx(value)