"""Splitting of separator-delimited lines into fields."""

from collections import deque


class Tokenizer:
    """Hands out the fields of *text* one at a time.

    A trailing separator yields a final empty field, and an empty text yields
    one empty field, just as reading a stream field by field would.
    """

    def __init__(self, text, separator):
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        self._tokens = deque(text.split(separator))

    def has_next(self):
        """Tell whether another field is left."""
        return bool(self._tokens)

    def next(self):
        """Return the next field; raise IndexError once all were read."""
        if not self._tokens:
            raise IndexError("no fields left")
        return self._tokens.popleft()

    def remaining(self):
        """Return and consume all fields not read yet."""
        rest = list(self._tokens)
        self._tokens.clear()
        return rest

    def __iter__(self):
        while self._tokens:
            yield self._tokens.popleft()