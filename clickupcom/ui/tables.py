"""Declarative table schemas and the plain-text table renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from rich.text import Text

from clickupcom.ui.console import console

MAX_COLUMN_WIDTH = 40
COLUMN_GAP = "  "
NO_RESULTS = "No results found."


@dataclass(frozen=True)
class Column:
    """One table column: record key, header label, optional formatter."""
    key: str
    label: str
    format: Optional[Callable[[Any, dict], Any]] = None

    def cell(self, row: dict) -> str:
        value = row.get(self.key)
        if self.format is not None:
            value = self.format(value, row)
        return "" if value is None else str(value)


def column_widths(rows: Sequence[dict], columns: Sequence[Column]) -> list[int]:
    """Widest of header and cells per column, capped at MAX_COLUMN_WIDTH."""
    widths = []
    for col in columns:
        width = max([len(col.label)] + [len(col.cell(row)) for row in rows])
        widths.append(min(width, MAX_COLUMN_WIDTH))
    return widths


def format_table(rows: Sequence[dict], columns: Sequence[Column]) -> tuple[str, list[str]]:
    """Return the header line and one line per row.

    Cells wider than their column are cut, never wrapped.
    """
    widths = column_widths(rows, columns)
    header = COLUMN_GAP.join(col.label[:w].ljust(w) for col, w in zip(columns, widths))
    lines = [
        COLUMN_GAP.join(col.cell(row)[:w].ljust(w) for col, w in zip(columns, widths))
        for row in rows
    ]
    return header, lines


def print_table(rows: Sequence[dict], columns: Sequence[Column]) -> None:
    """Render rows as an aligned table followed by a result count."""
    if not rows:
        console.print(Text(NO_RESULTS, style="warning"))
        return

    header, lines = format_table(rows, columns)
    console.print(Text(header, style="table.header"), soft_wrap=True)
    console.print(Text("─" * len(header), style="table.rule"), soft_wrap=True)
    for line in lines:
        console.print(Text(line), soft_wrap=True)

    console.print()
    console.print(Text(f"{len(rows)} result(s)", style="table.count"))
