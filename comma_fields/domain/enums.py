"""Quote state enumeration."""

from __future__ import annotations

from enum import Enum


class QuoteState(Enum):
    UNQUOTED = ""
    SINGLE_QUOTED = "'"
    DOUBLE_QUOTED = '"'

    @property
    def is_quoted(self) -> bool:
        return self is not QuoteState.UNQUOTED

    def closes(self, char: str) -> bool:
        """True if ``char`` ends the quoted span this state belongs to."""
        return self.is_quoted and char == self.value

    @classmethod
    def from_char(cls, char: str) -> QuoteState | None:
        return _OPENING_QUOTES.get(char)


_OPENING_QUOTES: dict[str, QuoteState] = {
    "'": QuoteState.SINGLE_QUOTED,
    '"': QuoteState.DOUBLE_QUOTED,
}
