"""Field span value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class FieldSpan:
    """Half-open ``[start, end)`` range of one field inside the scanned text.

    The span does not hold the text itself; resolve it with :meth:`slice`
    against the same input the scanner was built from.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid field span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.end == self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"
