"""Rich console instances and message helpers.

Results go to ``console`` (stdout) so they can be piped; errors,
spinners and log records go to ``err_console`` (stderr).
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from clickupcom.ui.theme import get_theme


console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def print_error(message: str) -> None:
    """Print a one-line error to stderr."""
    content = Text()
    content.append("✖ ", style="error")
    content.append(message)
    err_console.print(content, soft_wrap=True)


def print_success(message: str, detail: str = "") -> None:
    """Print a one-line success message, optionally with a bold detail."""
    content = Text()
    content.append("✔ ", style="success")
    content.append(message)
    if detail:
        content.append(detail, style="bold")
    console.print(content, soft_wrap=True)


def print_json(data: Any) -> None:
    """Pretty-print a result exactly as received."""
    console.print_json(data=data, indent=2)


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Route log records through Rich on stderr."""
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=False)
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if root.level <= logging.DEBUG else logging.WARNING)
