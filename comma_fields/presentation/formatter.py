"""Output formatters for scanned records."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod

Record = list[str]


class RecordFormatter(ABC):
    """Renders a batch of scanned records as text."""

    @abstractmethod
    def format_records(self, records: list[Record]) -> str:
        ...


class LinesFormatter(RecordFormatter):
    """One record per line, fields separated by `` | ``."""

    separator = " | "

    def format_records(self, records: list[Record]) -> str:
        return "".join(self.separator.join(r) + "\n" for r in records)


class JsonFormatter(RecordFormatter):
    def format_records(self, records: list[Record]) -> str:
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"


class MarkdownFormatter(RecordFormatter):
    """Markdown table with one column per field position."""

    def format_records(self, records: list[Record]) -> str:
        if not records:
            return "No records.\n"

        width = max(len(r) for r in records)
        header = ["#"] + [f"Field {i + 1}" for i in range(width)]

        lines = [
            "| " + " | ".join(header) + " |",
            "|" + "|".join("---" for _ in header) + "|",
        ]
        for n, record in enumerate(records, 1):
            cells = [self._escape(f) for f in record]
            cells += [""] * (width - len(record))
            lines.append(f"| {n} | " + " | ".join(cells) + " |")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("|", "\\|")


_FORMATTERS: dict[str, type[RecordFormatter]] = {
    "lines": LinesFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
}


def get_formatter(name: str) -> RecordFormatter:
    formatter_cls = _FORMATTERS.get(name)
    if formatter_cls is None:
        raise ValueError(f"Unknown output format: {name}")
    return formatter_cls()
