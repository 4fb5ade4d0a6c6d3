"""Single-entity detail views."""

from __future__ import annotations

from typing import Any, Sequence

from rich.text import Text

from clickupcom.ui.console import console


def print_details(title: str, fields: Sequence[tuple[str, Any, str]]) -> None:
    """Print a titled block of ``label: value`` lines in the given order.

    Each field is ``(label, value, style)``; labels are padded so the
    values line up.
    """
    console.print()
    console.print(Text(title, style="title"))
    console.print()

    pad = max((len(label) for label, _, _ in fields), default=0) + 2
    for label, value, style in fields:
        line = Text()
        line.append(f"{label}:".ljust(pad), style="label")
        line.append(str(value), style=style)
        console.print(line, soft_wrap=True)
