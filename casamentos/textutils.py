"""Small string helpers: trimming, case-insensitive ordering, digit checks."""

import string

_WHITESPACE = " \t\n\v\f\r"
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ltrim(text):
    """Strip leading whitespace."""
    return text.lstrip(_WHITESPACE)


def rtrim(text):
    """Strip trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def trim(text):
    """Strip whitespace on both ends."""
    return ltrim(rtrim(text))


def string_compare(first, second):
    """Tell whether *first* sorts before *second*, ignoring ASCII letter case."""
    return first.translate(_LOWER) < second.translate(_LOWER)


def is_number(text):
    """Tell whether *text* is non-empty and made only of decimal digits."""
    return bool(text) and all(char in string.digits for char in text)