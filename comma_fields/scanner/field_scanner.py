"""Quote-aware scanner over a single comma-separated line."""

from __future__ import annotations

import logging
from typing import Iterator, Union

from comma_fields.domain.enums import QuoteState
from comma_fields.domain.exceptions import InvalidInputException
from comma_fields.domain.value_objects import FieldSpan

logger = logging.getLogger(__name__)

DELIMITER = ","

TextInput = Union[str, bytes, bytearray, memoryview]


def _as_text(source: TextInput) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputException(f"Input is not valid UTF-8: {e}") from e
    if source is None:
        raise InvalidInputException("Input text is missing")
    raise InvalidInputException(
        f"Expected str or bytes input, got {type(source).__name__}"
    )


class FieldScanner:
    """Forward-only cursor producing the fields of one comma-separated line.

    The scanner splits on commas that are not inside a quoted span. A span
    opens at ``'`` or ``"`` and closes at the next quote of the same kind.
    Quote characters stay in the field; whitespace is never trimmed. An
    unterminated quote runs to the end of the input.

    Every input yields at least one field: the empty string yields one empty
    field and a trailing comma yields a trailing empty field, so joining the
    fields with ``","`` reproduces the input.

    Once the last field has been produced the scanner is exhausted for good:
    ``next_span`` and ``advance`` return ``None`` and ``next`` raises
    ``StopIteration`` on every later call.
    """

    def __init__(self, text: TextInput) -> None:
        self._text = _as_text(text)
        self._pos = 0
        self._exhausted = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._pos

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_span(self) -> FieldSpan | None:
        """Scan the next field and return its span, or None when exhausted."""
        if self._exhausted:
            return None

        text = self._text
        start = self._pos
        state = QuoteState.UNQUOTED

        for i in range(start, len(text)):
            char = text[i]
            if state.is_quoted:
                if state.closes(char):
                    state = QuoteState.UNQUOTED
            elif char == DELIMITER:
                self._pos = i + 1
                return FieldSpan(start, i)
            else:
                state = QuoteState.from_char(char) or state

        self._pos = len(text)
        self._exhausted = True
        if state.is_quoted:
            logger.debug("Unterminated %s span at end of input", state.name.lower())
        logger.debug("Scanner exhausted at offset %d", self._pos)
        return FieldSpan(start, len(text))

    def advance(self) -> str | None:
        """Return the next field text, or None when exhausted."""
        span = self.next_span()
        if span is None:
            return None
        return span.slice(self._text)

    def spans(self) -> Iterator[FieldSpan]:
        """Iterate over the remaining field spans, sharing this cursor."""
        while True:
            span = self.next_span()
            if span is None:
                return
            yield span

    def __iter__(self) -> FieldScanner:
        return self

    def __next__(self) -> str:
        field = self.advance()
        if field is None:
            raise StopIteration
        return field

    def __repr__(self) -> str:
        return (
            f"FieldScanner(position={self._pos}, length={len(self._text)}, "
            f"exhausted={self._exhausted})"
        )


def iter_fields(text: TextInput) -> FieldScanner:
    """Return a fresh scanner over ``text``."""
    return FieldScanner(text)


def split_fields(text: TextInput) -> list[str]:
    """Split ``text`` into all of its fields.

    >>> split_fields("foo, \\"bar\\", 'quoted, part'")
    ['foo', ' "bar"', " 'quoted, part'"]
    """
    return list(FieldScanner(text))
