"""Decimal numbers written the Brazilian way: comma as decimal point, no grouping."""

import re

DECIMAL_POINT = ","

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:\d+(?:,\d*)?|,\d+)(?:[eE][+-]?\d+)?)"
)


def parse_double(text):
    """Read the leading decimal number of *text*, using a comma as decimal point.

    Characters after the number are ignored; text that does not start with a
    number reads as 0.0.
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0.0
    return float(match.group(1).replace(DECIMAL_POINT, "."))


def _fixed(value, digits):
    return f"{value:.{digits}f}".replace(".", DECIMAL_POINT)


def format_double(value):
    """Format with six decimal places and a comma as decimal point."""
    return _fixed(value, 6)


def format_currency(value):
    """Format with two decimal places and a comma as decimal point."""
    return _fixed(value, 2)